import json
import logging
import os

import requests
from flask import current_app

from exceptions import EmailDeliveryError, MailerNotConfiguredError

logger = logging.getLogger(__name__)


class Mailer:
    """Notification interface: deliver one message, return its provider id."""

    def send(self, message):
        raise NotImplementedError


class ResendMailer(Mailer):
    """Single-attempt client for the Resend ``POST /emails`` endpoint."""

    def __init__(self, api_key, api_url="https://api.resend.com/emails"):
        self.api_key = api_key
        self.api_url = api_url

    def send(self, message):
        logger.info(
            "Sending email from=%s to=%s subject=%r",
            message.get("from"), message.get("to"), message.get("subject"),
        )
        try:
            response = requests.post(
                self.api_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=message,
            )
        except requests.RequestException as e:
            logger.error("Email transport error: %s", e)
            raise EmailDeliveryError(f"Email transport error: {e}") from e

        body = response.text
        logger.info("Resend API response status=%s body=%s", response.status_code, body)

        if not response.ok:
            logger.error("Email sending failed - Status: %s Body: %s", response.status_code, body)
            raise EmailDeliveryError(
                f"Resend API returned {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data = json.loads(body)
        except ValueError:
            data = None
        email_id = data.get("id") if isinstance(data, dict) else None
        logger.info("Email sent successfully! ID: %s", email_id)
        return email_id


def build_message(subject, html, to, reply_to, attachments=None):
    message = {
        "from": current_app.config["MAIL_FROM"],
        "to": [to],
        "subject": subject,
        "html": html,
        "reply_to": reply_to,
    }
    if attachments:
        message["attachments"] = attachments
    return message


def get_mailer():
    """Resolve the mailer for the current request.

    An explicitly registered mailer wins; otherwise the Resend key is read
    from config and then the process environment on every call.
    """
    mailer = current_app.extensions.get("mailer")
    if mailer is not None:
        return mailer

    api_key = current_app.config.get("RESEND_API_KEY") or os.getenv("RESEND_API_KEY")
    if not api_key:
        raise MailerNotConfiguredError("RESEND_API_KEY not configured")
    return ResendMailer(api_key, api_url=current_app.config["RESEND_API_URL"])
