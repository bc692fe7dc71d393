"""Profile routes."""

from fastapi import APIRouter, Depends

from ...errors import NotFoundError
from ...models.user import UserChanges
from ..context import AppContext, get_context, require_session
from ..responses import ok
from ..schemas import EditUserRequest, PathId

router = APIRouter(tags=["users"], dependencies=[Depends(require_session)])


@router.get("/getDataEditUsers/{user_id}")
async def get_user(user_id: PathId, ctx: AppContext = Depends(get_context)):
    """Profile data for the edit screen."""
    user = await ctx.users.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return ok(user=user.to_dict())


@router.put("/editusers/{user_id}")
async def edit_user(
    user_id: PathId,
    body: EditUserRequest,
    ctx: AppContext = Depends(get_context),
):
    """Change only the supplied profile fields."""
    changes = UserChanges(
        user_name=(body.userName or "").strip() or None,
        email=(body.email or "").strip() or None,
        password_hash=ctx.authenticator.hash_password(body.password) if body.password else None,
        profile_picture_url=body.profilePictureUrl or None,
    )
    await ctx.users.update(user_id, changes)
    return ok("Profile updated successfully")


@router.delete("/deleteUsers/{user_id}")
async def delete_user(user_id: PathId, ctx: AppContext = Depends(get_context)):
    """Delete an account along with its workouts and points."""
    await ctx.users.delete(user_id)
    return ok("User deleted successfully")
