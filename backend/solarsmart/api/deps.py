"""
Shared application state and FastAPI dependencies.

Stores are created once per process; tests replace them through
``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from solarsmart.config import ADMIN_PASSWORD, LEADS_FILE, SETTINGS_FILE
from solarsmart.engine.auth import AdminAuth
from solarsmart.engine.lead_store import LeadStore
from solarsmart.engine.settings_store import SettingsStore

_settings_store = SettingsStore(SETTINGS_FILE)
_lead_store = LeadStore(LEADS_FILE)
_admin_auth = AdminAuth(ADMIN_PASSWORD)


def get_settings_store() -> SettingsStore:
    return _settings_store


def get_lead_store() -> LeadStore:
    return _lead_store


def get_admin_auth() -> AdminAuth:
    return _admin_auth


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def require_admin(
    token: Optional[str] = Depends(bearer_token),
    auth: AdminAuth = Depends(get_admin_auth),
) -> str:
    if not auth.is_authenticated(token):
        raise HTTPException(status_code=401, detail="Admin login required")
    return token
