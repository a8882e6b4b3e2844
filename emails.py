"""Notification e-mail bodies and subjects for the three inquiry forms."""

from datetime import datetime

from flask import render_template
from markupsafe import Markup, escape


def nl2br(value):
    """Escape ``value`` and turn its line breaks into ``<br>`` tags."""
    if not value:
        return ""
    return Markup("<br>").join(escape(value).splitlines())


def submitted_on(now=None):
    now = now or datetime.now()
    return now.strftime("%A, %B %d, %Y at %I:%M %p")


def render_contact_email(inquiry):
    return render_template(
        "emails/contact.html", inquiry=inquiry, submitted_on=submitted_on()
    )


def render_application_email(application, resume=None):
    skills = [application.get(f"skill{i}") for i in range(1, 4)]
    return render_template(
        "emails/application.html",
        application=application,
        skills=[skill for skill in skills if skill],
        resume=resume,
        submitted_on=submitted_on(),
    )


def render_hire_email(inquiry):
    return render_template(
        "emails/hire.html", inquiry=inquiry, submitted_on=submitted_on()
    )


def contact_subject(inquiry):
    return f"New Contact: {inquiry['name']}"


def application_subject(application):
    subject = f"New Application: {application['firstName']} {application['lastName']}"
    if application.get("position"):
        subject += f" - {application['position']}"
    return subject


def hire_subject(inquiry):
    return f"New Hiring Inquiry: {inquiry['companyName']} - {inquiry.get('positionTitle') or 'Position Inquiry'}"
