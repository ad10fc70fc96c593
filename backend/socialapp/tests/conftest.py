"""
Shared fixtures: in-memory database, test client and a recording relay.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from socialapp.core.config import settings
from socialapp.db.session import get_db, init_db
from socialapp.db.base import Base
from socialapp.api.dependencies import get_relay
from socialapp.main import app
from socialapp.realtime.registry import ConnectionRegistry
from socialapp.realtime.relay import RealtimeRelay

# Cheapest bcrypt cost for tests
settings.BCRYPT_ROUNDS = 4


class FakeSocketServer:
    """Stands in for socketio.AsyncServer and records every emit."""

    def __init__(self):
        self.emitted = []
        self.handlers = {}

    def on(self, event, handler=None, namespace=None):
        self.handlers[event] = handler

    async def emit(self, event, data=None, to=None, room=None, skip_sid=None, **kwargs):
        self.emitted.append({
            "event": event,
            "data": data,
            "to": to or room,
            "skip_sid": skip_sid,
        })

    def events(self, name):
        return [e for e in self.emitted if e["event"] == name]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_sio():
    return FakeSocketServer()


@pytest.fixture
def relay(fake_sio):
    relay = RealtimeRelay(fake_sio, ConnectionRegistry())
    relay.register_handlers()
    return relay


@pytest.fixture
def client(engine, relay):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_relay] = lambda: relay
    yield TestClient(app)
    app.dependency_overrides.clear()
