import base64
import re

from werkzeug.utils import secure_filename

from exceptions import ValidationError

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(data, fields):
    return [field for field in fields if is_blank(data.get(field))]


def require_fields(data, fields, message):
    if missing_fields(data, fields):
        raise ValidationError(message)


def is_valid_email(email):
    return isinstance(email, str) and bool(EMAIL_REGEX.match(email))


def require_valid_email(email, message="Please enter a valid email address."):
    if not is_valid_email(email):
        raise ValidationError(message)


def read_resume(file, max_bytes):
    """Validate an uploaded resume and return it as an e-mail attachment.

    Returns ``None`` when no file (or an empty one) was sent. The type check
    runs before the size check.
    """
    if file is None:
        return None

    content = file.read()
    if not content:
        return None

    if file.mimetype not in ALLOWED_RESUME_TYPES:
        raise ValidationError("Invalid file type. Please upload a PDF, DOC, or DOCX file.")

    if len(content) > max_bytes:
        raise ValidationError("File too large. Please upload a file smaller than 10MB.")

    return {
        "filename": secure_filename(file.filename or "") or "resume",
        "content": base64.b64encode(content).decode("ascii"),
        "size": len(content),
    }
