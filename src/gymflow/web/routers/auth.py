"""Registration and login routes."""

import logging

from fastapi import APIRouter, Depends

from ...errors import AuthError
from ...models.user import User
from ..context import AppContext, get_context
from ..responses import ok
from ..schemas import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, ctx: AppContext = Depends(get_context)):
    """Create an account. Email and user name must be unused."""
    user = User(
        user_name=body.userName,
        email=body.email,
        password_hash=ctx.authenticator.hash_password(body.password),
        profile_picture_url=body.profilePictureUrl or None,
    )
    user_id = await ctx.users.create(user)
    logger.info("Registered user %s", user_id)
    return ok("User registered successfully", status_code=201, userId=user_id)


@router.post("/login")
async def login(body: LoginRequest, ctx: AppContext = Depends(get_context)):
    """Exchange email-or-user-name plus password for a session token."""
    user = await ctx.users.find_by_identifier(body.identifier)
    if user is None or not ctx.authenticator.check_password(user, body.password):
        raise AuthError("Invalid credentials")

    return ok(
        "Login successful",
        token=ctx.authenticator.issue_token(user),
        user=user.to_dict(),
    )
