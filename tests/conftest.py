import json

import pytest

import mailer
from app import create_app
from auth import issue_client_token
from db import db

SECRET = "shiftorl-test-secret-0123456789abcdef"


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.text = body if body is not None else json.dumps({"id": "email_123"})

    @property
    def ok(self):
        return 200 <= self.status_code < 300


class RecordingPost:
    """Stands in for ``requests.post`` and remembers every call."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse()
        self.error = None

    def __call__(self, url, headers=None, json=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "json": json, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def respond(self, status_code, body):
        self.response = FakeResponse(status_code=status_code, body=body)

    @property
    def last_payload(self):
        return self.calls[-1]["json"]


@pytest.fixture
def resend(monkeypatch):
    post = RecordingPost()
    monkeypatch.setattr(mailer.requests, "post", post)
    return post


@pytest.fixture
def app(monkeypatch, resend):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": SECRET,
        "CLIENT_JWT_SECRET": SECRET,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "RESEND_API_KEY": "re_test_key",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {issue_client_token(SECRET)}"}
