"""Basic Authentication — credential check guarding every resource route.

Invariants:
    - Missing or wrong credentials → 401 with WWW-Authenticate: Basic
    - Comparison is constant-time on both username and password
    - Credentials come from Settings (api_username / api_password)
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from mazealarm.config import Settings, get_settings

logger = logging.getLogger(__name__)

_basic = HTTPBasic(auto_error=False)


def require_basic_auth(
    credentials: HTTPBasicCredentials | None = Depends(_basic),
    settings: Settings = Depends(get_settings),
) -> str:
    """Return the authenticated username or raise 401."""
    if credentials is not None:
        username_ok = secrets.compare_digest(
            credentials.username.encode(), settings.api_username.encode(),
        )
        password_ok = secrets.compare_digest(
            credentials.password.encode(), settings.api_password.encode(),
        )
        if username_ok and password_ok:
            return credentials.username
        logger.warning("Rejected credentials", extra={"error_code": "UNAUTHORIZED"})
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Basic"},
    )
