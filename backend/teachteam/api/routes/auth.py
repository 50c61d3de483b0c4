"""Auth Routes — signup, signin, logout and session introspection.

Invariants:
    - Signin sets the signed session cookie; logout clears it
    - /check never fails: an anonymous or blocked caller gets authenticated=false
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import (
    end_session, get_current_user, load_session_user, start_session,
)
from teachteam.core.errors import AccountBlockedError
from teachteam.infrastructure.database import get_db
from teachteam.models.user import User
from teachteam.schemas.auth import SigninRequest, SignupRequest
from teachteam.services.accounts import AccountService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, db: AsyncSession = Depends(get_db)):
    user = await AccountService(db).signup(body)
    return {
        "success": True,
        "message": "User registered successfully",
        "user": user.to_public_dict(),
    }


@router.post("/signin")
async def signin(
    body: SigninRequest, request: Request, db: AsyncSession = Depends(get_db),
):
    accounts = AccountService(db)
    user = await accounts.authenticate(body.email, body.password)
    start_session(request, user)
    logger.info("User signed in", extra={"user_id": user.id, "role": user.role})
    return {
        "success": True,
        "message": "Sign in successful",
        "user": {
            **user.to_public_dict(),
            "roleSpecificId": await accounts.role_specific_id(user),
        },
    }


@router.post("/logout")
async def logout(request: Request):
    end_session(request)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/profile")
async def profile(
    user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db),
):
    return {
        "success": True,
        "user": {
            **user.to_public_dict(),
            "roleSpecificId": await AccountService(db).role_specific_id(user),
        },
    }


@router.get("/check")
async def check(request: Request, db: AsyncSession = Depends(get_db)):
    try:
        user = await load_session_user(request, db)
    except AccountBlockedError:
        user = None
    return {
        "authenticated": user is not None,
        "user": user.to_public_dict() if user else None,
    }
