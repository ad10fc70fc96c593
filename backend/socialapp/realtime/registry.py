"""In-memory registry of connected realtime clients."""
from typing import Dict, Optional


class ConnectionRegistry:
    """Connected Socket.IO session ids and their announced chat names.

    A session is added on connect with no name, named by ``join_chat``,
    and removed on disconnect.
    """

    def __init__(self):
        self._names: Dict[str, Optional[str]] = {}

    def add(self, sid: str) -> None:
        self._names.setdefault(sid, None)

    def set_name(self, sid: str, name: str) -> bool:
        if sid not in self._names:
            return False
        self._names[sid] = name
        return True

    def name_of(self, sid: str) -> Optional[str]:
        return self._names.get(sid)

    def remove(self, sid: str) -> Optional[str]:
        """Forget the session and return the name it had joined with."""
        return self._names.pop(sid, None)

    def __contains__(self, sid: object) -> bool:
        return sid in self._names

    def __len__(self) -> int:
        return len(self._names)
