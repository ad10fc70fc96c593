"""
Request dependencies shared by the route modules.
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from socialapp.realtime.relay import RealtimeRelay
from socialapp.services.auth_service import authenticate

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> int:
    """Guard for protected routes: resolve the bearer token to a user id."""
    token = credentials.credentials if credentials else None
    return authenticate(token)


def get_relay(request: Request) -> RealtimeRelay:
    """The relay attached to the application at startup."""
    return request.app.state.relay
