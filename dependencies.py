"""Shared route dependencies."""
import secrets

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import settings

security = HTTPBearer(auto_error=False)


def require_admin(credentials: HTTPAuthorizationCredentials | None = Depends(security)) -> None:
    """
    Gate admin routes on the shared ADMIN_API_KEY (Authorization: Bearer <key>).
    Session-based login lives in front of this service; an empty key turns the check off.
    """
    expected = settings.admin_api_key
    if not expected:
        return
    if not credentials:
        raise HTTPException(status_code=401, detail="Unauthorized")
    if not secrets.compare_digest((credentials.credentials or "").strip(), expected):
        raise HTTPException(status_code=401, detail="Unauthorized")
