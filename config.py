import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

REQUIRED_VARS = ["SECRET_KEY", "DATABASE_URL"]


def normalize_database_url(url):
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.getenv("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer credential attached by the site's submission client
    CLIENT_JWT_SECRET = os.getenv("CLIENT_JWT_SECRET") or os.getenv("SECRET_KEY")

    # Resend; the key itself is looked up again on every request
    RESEND_API_KEY = os.getenv("RESEND_API_KEY")
    RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
    MAIL_FROM = os.getenv("MAIL_FROM", "ShiftORL <info@shiftorl.site>")
    CONTACT_INBOX = os.getenv("CONTACT_INBOX", "info@shiftorl.site")
    HIRE_INBOX = os.getenv("HIRE_INBOX", "hire@shiftorl.site")

    MAX_RESUME_BYTES = 10 * 1024 * 1024
    MAX_CONTENT_LENGTH = 12 * 1024 * 1024

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_environment():
    """Fail fast when a required variable is missing."""
    missing_vars = [var for var in REQUIRED_VARS if not os.getenv(var)]
    if missing_vars:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing_vars)}")
