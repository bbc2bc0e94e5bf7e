"""
API routes for admin login/logout.
"""

from fastapi import APIRouter, Depends, HTTPException

from solarsmart.api.deps import get_admin_auth, require_admin
from solarsmart.engine.auth import AdminAuth
from solarsmart.models.admin import LoginInput, LoginOutput

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/login", response_model=LoginOutput)
async def login(data: LoginInput, auth: AdminAuth = Depends(get_admin_auth)) -> LoginOutput:
    token = auth.login(data.password)
    if token is None:
        raise HTTPException(status_code=401, detail="Invalid password")
    return LoginOutput(token=token)


@router.post("/logout", status_code=204)
async def logout(
    token: str = Depends(require_admin),
    auth: AdminAuth = Depends(get_admin_auth),
) -> None:
    auth.logout(token)
