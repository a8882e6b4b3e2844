import pytest
import requests

from exceptions import EmailDeliveryError, MailerNotConfiguredError
from mailer import Mailer, ResendMailer, build_message, get_mailer


def test_send_posts_payload_and_returns_id(resend):
    mailer = ResendMailer("re_abc")
    message = {"from": "a@x.io", "to": ["b@x.io"], "subject": "Hi", "html": "<p>Hi</p>", "reply_to": "c@x.io"}

    assert mailer.send(message) == "email_123"

    call = resend.calls[0]
    assert call["url"] == "https://api.resend.com/emails"
    assert call["headers"] == {"Authorization": "Bearer re_abc", "Content-Type": "application/json"}
    assert call["json"] == message
    assert "timeout" not in call["kwargs"]


def test_single_attempt_on_failure(resend):
    resend.respond(429, "rate limited")

    with pytest.raises(EmailDeliveryError) as excinfo:
        ResendMailer("re_abc").send({"to": ["b@x.io"]})

    assert excinfo.value.status_code == 429
    assert excinfo.value.body == "rate limited"
    assert len(resend.calls) == 1


def test_transport_error_is_wrapped(resend):
    resend.error = requests.Timeout("slow")

    with pytest.raises(EmailDeliveryError) as excinfo:
        ResendMailer("re_abc").send({"to": ["b@x.io"]})
    assert excinfo.value.status_code is None


def test_non_json_success_body_yields_no_id(resend):
    resend.respond(200, "accepted")
    assert ResendMailer("re_abc").send({"to": ["b@x.io"]}) is None


def test_build_message_only_adds_attachments_when_present(app):
    with app.test_request_context():
        plain = build_message("S", "<p></p>", to="in@x.io", reply_to="me@x.io")
        with_file = build_message(
            "S", "<p></p>", to="in@x.io", reply_to="me@x.io",
            attachments=[{"filename": "cv.pdf", "content": "AAA="}],
        )

    assert plain == {
        "from": "ShiftORL <info@shiftorl.site>",
        "to": ["in@x.io"],
        "subject": "S",
        "html": "<p></p>",
        "reply_to": "me@x.io",
    }
    assert with_file["attachments"] == [{"filename": "cv.pdf", "content": "AAA="}]


def test_get_mailer_prefers_registered_mailer(app):
    class Outbox(Mailer):
        def send(self, message):
            return "local"

    app.extensions["mailer"] = Outbox()
    with app.test_request_context():
        assert get_mailer().send({}) == "local"


def test_get_mailer_without_key(app):
    app.config["RESEND_API_KEY"] = None
    with app.test_request_context():
        with pytest.raises(MailerNotConfiguredError):
            get_mailer()


@pytest.mark.parametrize("body", ["[]", "null", '"queued"'])
def test_non_object_success_body_yields_no_id(resend, body):
    resend.respond(200, body)
    assert ResendMailer("re_abc").send({"to": ["b@x.io"]}) is None
