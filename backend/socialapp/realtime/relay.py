"""Socket.IO relay for the global chat and poke alerts.

Every connected client shares one broadcast domain: there are no rooms
and no per-user subscriptions. Nothing is stored, acknowledged or
replayed; a client only sees events emitted while it is connected.

Client -> server events:
- ``join_chat``: payload is the display name (string)
- ``send_message``: payload is ``{"message": str}``

Server -> client events:
- ``receive_message``: ``{"username", "message", "timestamp"}`` to everyone
- ``user_joined`` / ``user_left``: display name, to everyone else
- ``poke``: ``{"fromUserId", "toUserId"}`` to everyone

Malformed client payloads are dropped without a reply.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import socketio
from socialapp.core.config import settings
from socialapp.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


def create_server() -> socketio.AsyncServer:
    return socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=settings.CORS_ORIGINS,
        logger=False,
        engineio_logger=False,
    )


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class RealtimeRelay:
    """Binds chat handlers to a Socket.IO server and publishes poke alerts."""

    def __init__(self, sio: Any, registry: ConnectionRegistry):
        self.sio = sio
        self.registry = registry

    def register_handlers(self) -> None:
        self.sio.on("connect", self.on_connect)
        self.sio.on("disconnect", self.on_disconnect)
        self.sio.on("join_chat", self.on_join_chat)
        self.sio.on("send_message", self.on_send_message)

    async def on_connect(self, sid: str, environ: Dict[str, Any], auth: Optional[Any] = None):
        self.registry.add(sid)
        logger.info(f"Realtime client connected: {sid}")

    async def on_disconnect(self, sid: str, reason: Any = None):
        name = self.registry.remove(sid)
        if name:
            await self.sio.emit("user_left", name, skip_sid=sid)
        logger.info(f"Realtime client disconnected: {sid}")

    async def on_join_chat(self, sid: str, data: Any = None):
        if not isinstance(data, str) or not data.strip():
            return
        if not self.registry.set_name(sid, data):
            return
        await self.sio.emit("user_joined", data, skip_sid=sid)

    async def on_send_message(self, sid: str, data: Any = None):
        if sid not in self.registry or not isinstance(data, dict):
            return
        message = data.get("message")
        if not isinstance(message, str):
            return

        payload = {
            "username": self.registry.name_of(sid),
            "message": message,
            "timestamp": _timestamp(),
        }
        await self.sio.emit("receive_message", payload)

    async def publish_poke(self, from_user_id: int, to_user_id: int) -> None:
        """Tell every connected client about a poke; clients filter by id."""
        await self.sio.emit(
            "poke",
            {"fromUserId": from_user_id, "toUserId": to_user_id},
        )
