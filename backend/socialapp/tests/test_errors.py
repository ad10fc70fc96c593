"""
Tests for mapping database and unexpected failures onto error responses.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from socialapp.core.exceptions import ConflictError, InternalError
from socialapp.db.session import commit
from socialapp.models.user import User
from socialapp.services import post_service


def test_db_error_is_opaque_500(client, monkeypatch):
    """A database failure during a read becomes a generic 500."""
    def broken_list_posts(db):
        raise OperationalError("SELECT * FROM posts", {}, Exception("disk I/O error at /var/db"))

    monkeypatch.setattr(post_service, "list_posts", broken_list_posts)

    response = client.get("/api/posts")
    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
    assert "disk" not in response.text


def test_unexpected_error_is_opaque_500(client, monkeypatch):
    def broken_list_posts(db):
        raise RuntimeError("secret=hunter2")

    monkeypatch.setattr(post_service, "list_posts", broken_list_posts)

    safe_client = TestClient(client.app, raise_server_exceptions=False)
    response = safe_client.get("/api/posts")
    assert response.status_code == 500
    assert response.json() == {"message": "Server error"}
    assert "hunter2" not in response.text


def test_commit_maps_integrity_error_to_conflict(db):
    db.add(User(email="a@x.com", username="alice", hashed_password="x"))
    commit(db)

    db.add(User(email="a@x.com", hashed_password="x"))
    with pytest.raises(ConflictError) as exc_info:
        commit(db, conflict_message="User already exists")
    assert exc_info.value.message == "User already exists"

    # Session is usable again after the rollback
    assert db.query(User).count() == 1


def test_commit_picks_message_for_failing_constraint(db):
    db.add(User(email="a@x.com", username="alice", hashed_password="x"))
    commit(db)

    messages = {"users.username": "Username already taken"}
    db.add(User(email="b@x.com", username="alice", hashed_password="x"))
    with pytest.raises(ConflictError) as exc_info:
        commit(db, conflict_message="User already exists", constraint_messages=messages)
    assert exc_info.value.message == "Username already taken"

    db.add(User(email="a@x.com", username="bob", hashed_password="x"))
    with pytest.raises(ConflictError) as exc_info:
        commit(db, conflict_message="User already exists", constraint_messages=messages)
    assert exc_info.value.message == "User already exists"


def test_commit_maps_other_db_errors_to_internal(db, monkeypatch):
    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(InternalError) as exc_info:
        commit(db)
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Server error"
