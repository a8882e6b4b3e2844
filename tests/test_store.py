from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from exceptions import DuplicateRecordError, StorageError
from store import Store, get_store, is_unique_violation


def test_insert_returns_stored_row(app):
    row = get_store().insert(
        "client_inquiries", {"name": "Jane", "email": "jane@example.com", "message": "Hi"}
    )

    assert row["id"] == 1
    assert row["name"] == "Jane"
    assert row["created_at"] is not None


def test_query_filters_orders_and_limits(app):
    store = get_store()
    for email in ["b@example.com", "a@example.com", "c@example.com"]:
        store.insert("email_subscriptions", {"email": email})

    rows = store.query("email_subscriptions", order_by="email", limit=2)
    assert [row["email"] for row in rows] == ["a@example.com", "b@example.com"]

    rows = store.query("email_subscriptions", filters={"email": "c@example.com"})
    assert len(rows) == 1

    rows = store.query("email_subscriptions", order_by="email", descending=True)
    assert rows[0]["email"] == "c@example.com"


def test_unique_violation_becomes_duplicate_error(app):
    store = get_store()
    store.insert("email_subscriptions", {"email": "fan@example.com"})

    with pytest.raises(DuplicateRecordError):
        store.insert("email_subscriptions", {"email": "fan@example.com"})

    # session is usable after the rollback
    store.insert("email_subscriptions", {"email": "other@example.com"})
    assert len(store.query("email_subscriptions")) == 2


def test_not_null_violation_is_a_storage_error(app):
    with pytest.raises(StorageError) as excinfo:
        get_store().insert("client_inquiries", {"name": "Jane", "email": "j@example.com"})
    assert not isinstance(excinfo.value, DuplicateRecordError)


def test_unknown_table(app):
    with pytest.raises(StorageError):
        get_store().insert("nope", {})


def test_postgres_unique_violation_code_is_recognized():
    orig = SimpleNamespace(pgcode="23505")
    error = IntegrityError("INSERT ...", {}, orig)
    assert is_unique_violation(error)


def test_unique_wording_without_sqlstate_is_not_a_duplicate():
    orig = Exception('null value in column "unique_code" violates not-null constraint')
    error = IntegrityError("INSERT ...", {}, orig)
    assert not is_unique_violation(error)


def test_sqlite_unique_message_is_recognized():
    orig = Exception("UNIQUE constraint failed: email_subscriptions.email")
    error = IntegrityError("INSERT ...", {}, orig)
    assert is_unique_violation(error)


def test_base_store_is_abstract():
    with pytest.raises(NotImplementedError):
        Store().insert("client_inquiries", {})
    with pytest.raises(NotImplementedError):
        Store().query("client_inquiries")
