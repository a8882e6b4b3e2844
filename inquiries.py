"""Lead-capture endpoints for the contact, apply and hire forms.

Each handler validates synchronously, performs its side effects in order
(store and/or e-mail) and answers with a JSON envelope. There is no retry,
deduplication or idempotency: a resubmitted form yields a second record or
e-mail.
"""

import logging
from datetime import datetime, timezone
from functools import wraps

from flask import Blueprint, abort, current_app, request
from werkzeug.exceptions import HTTPException

from auth import client_token_required
from emails import (
    application_subject,
    contact_subject,
    hire_subject,
    render_application_email,
    render_contact_email,
    render_hire_email,
)
from exceptions import (
    EmailDeliveryError,
    MailerNotConfiguredError,
    StorageError,
    ValidationError,
)
from mailer import build_message, get_mailer
from responses import error_response, success_response
from store import get_store
from validation import read_resume, require_fields, require_valid_email

logger = logging.getLogger(__name__)

bp = Blueprint("functions", __name__)

FUNCTION_METHODS = ["POST", "OPTIONS"]

CONTACT_FIELDS = ["name", "email", "message"]

APPLICATION_REQUIRED = ["firstName", "lastName", "email", "phone"]
APPLICATION_OPTIONAL = [
    "position", "experience", "location", "message", "skill1", "skill2", "skill3",
]

HIRE_REQUIRED = ["companyName", "contactName", "email", "phone"]
HIRE_DELEGATIONS = ["delegation1", "delegation2", "delegation3"]
HIRE_OPTIONAL = [
    "industry", "companySize", "positionTitle", "positionLevel",
    "timeline", "budget", "requirements", "benefits", "message",
]

THANK_YOU = "We will get back to you within 3 business days."


def preflight():
    return "ok", 200, {"Content-Type": "text/plain"}


def fallback_error(message):
    """Turn unexpected exceptions into a logged 500 envelope."""
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                logger.exception("Error processing %s", request.path)
                return error_response(500, message, details=str(e))
        return decorated
    return decorator


def parse_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Invalid JSON body")
    return data


def inbox(name):
    return current_app.config[name]


@bp.route("/process-contact-form", methods=FUNCTION_METHODS)
@client_token_required
@fallback_error("Failed to process your inquiry. Please try again or contact info@shiftorl.site")
def process_contact_form():
    if request.method == "OPTIONS":
        return preflight()

    data = parse_json_body()
    try:
        require_fields(data, CONTACT_FIELDS, "All fields are required")
        require_valid_email(data["email"], "Please enter a valid email address")
    except ValidationError as e:
        abort(400, description=str(e))

    inquiry = {field: str(data[field]) for field in CONTACT_FIELDS}

    try:
        record = get_store().insert("client_inquiries", inquiry)
    except StorageError as e:
        logger.error("Database error: %s", e)
        return error_response(
            500,
            "Failed to process your inquiry. Please try again or contact info@shiftorl.site",
            details="Failed to save inquiry to database",
        )
    logger.info("Inquiry saved to database: id=%s", record["id"])

    notify_contact(inquiry)

    return success_response(f"Thank you for your inquiry! {THANK_YOU}", data=record)


def notify_contact(inquiry):
    """Best-effort notification; the stored row is the record of truth."""
    try:
        mailer = get_mailer()
    except MailerNotConfiguredError:
        logger.warning("RESEND_API_KEY not configured, skipping email")
        return

    try:
        message = build_message(
            contact_subject(inquiry),
            render_contact_email(inquiry),
            to=inbox("CONTACT_INBOX"),
            reply_to=inquiry["email"],
        )
        mailer.send(message)
    except EmailDeliveryError as e:
        logger.error("Contact email failed (status=%s): %s", e.status_code, e.body or e)
    except Exception:
        logger.exception("Contact email could not be sent, skipping")


@bp.route("/submit-application", methods=FUNCTION_METHODS)
@client_token_required
@fallback_error("Failed to process application. Please try again or email info@shiftorl.site")
def submit_application():
    if request.method == "OPTIONS":
        return preflight()

    form = request.form
    application = {
        field: form.get(field, "") for field in APPLICATION_REQUIRED + APPLICATION_OPTIONAL
    }

    try:
        require_fields(
            application,
            APPLICATION_REQUIRED,
            "Missing required fields. Please fill in first name, last name, email, and phone.",
        )
        require_valid_email(application["email"])
        resume = read_resume(
            request.files.get("resume"), current_app.config["MAX_RESUME_BYTES"]
        )
    except ValidationError as e:
        abort(400, description=str(e))

    html = render_application_email(application, resume)

    try:
        mailer = get_mailer()
    except MailerNotConfiguredError:
        logger.error("RESEND_API_KEY not configured")
        return error_response(
            500, "Email service not configured. Please contact info@shiftorl.site"
        )

    attachments = None
    if resume:
        attachments = [{"filename": resume["filename"], "content": resume["content"]}]

    message = build_message(
        application_subject(application),
        html,
        to=inbox("CONTACT_INBOX"),
        reply_to=application["email"],
        attachments=attachments,
    )
    logger.info("Applicant: %s %s", application["firstName"], application["lastName"])

    try:
        email_id = mailer.send(message)
    except EmailDeliveryError as e:
        return error_response(
            500,
            "Failed to send application. Please email your resume to info@shiftorl.site",
            details={"status": e.status_code, "response": e.body},
        )

    return success_response(
        "Application submitted successfully! We will review your application and get back to you within 3 business days.",
        emailId=email_id,
    )


def hire_failure_message(status_code):
    message = "Failed to send email. "
    if status_code == 401:
        message += (
            "The email service API key is invalid or expired. Please check the "
            "Resend API key configuration. Contact hire@shiftorl.site if this persists."
        )
    elif status_code == 403:
        message += (
            "The sender domain (info@shiftorl.site) is not verified in Resend. Please "
            "verify your domain. Contact hire@shiftorl.site if this persists."
        )
    else:
        message += "Please contact us directly at hire@shiftorl.site"
    return message


@bp.route("/submit-hire-inquiry", methods=FUNCTION_METHODS)
@client_token_required
@fallback_error("Failed to process inquiry. Please try again or contact hire@shiftorl.site")
def submit_hire_inquiry():
    if request.method == "OPTIONS":
        return preflight()

    data = parse_json_body()
    try:
        require_fields(
            data,
            HIRE_REQUIRED,
            "Missing required fields. Please fill in company name, contact name, email, and phone.",
        )
        require_fields(data, HIRE_DELEGATIONS, "Please fill in all three delegation opportunities.")
        require_valid_email(data["email"])
    except ValidationError as e:
        abort(400, description=str(e))

    inquiry = {
        field: data.get(field) or ""
        for field in HIRE_REQUIRED + HIRE_DELEGATIONS + HIRE_OPTIONAL
    }
    html = render_hire_email(inquiry)

    try:
        mailer = get_mailer()
    except MailerNotConfiguredError:
        logger.error("RESEND_API_KEY not configured")
        return error_response(
            500, "Email service not configured. Please contact support at hire@shiftorl.site"
        )

    message = build_message(
        hire_subject(inquiry),
        html,
        to=inbox("HIRE_INBOX"),
        reply_to=inquiry["email"],
    )
    logger.info("Hire inquiry from company=%s", inquiry["companyName"])

    try:
        email_id = mailer.send(message)
    except EmailDeliveryError as e:
        return error_response(
            500,
            hire_failure_message(e.status_code),
            details={
                "status": e.status_code,
                "response": e.body,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    return success_response(f"Inquiry submitted successfully! {THANK_YOU}", emailId=email_id)
