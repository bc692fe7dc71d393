"""Points and leaderboard routes."""

from fastapi import APIRouter, Depends

from ..context import AppContext, get_context, require_session
from ..responses import ok
from ..schemas import AddPointRequest

router = APIRouter(tags=["ranking"], dependencies=[Depends(require_session)])


@router.post("/addPoint")
async def add_point(body: AddPointRequest, ctx: AppContext = Depends(get_context)):
    """Award one point for a completed workout."""
    points = await ctx.points.award(body.userId)
    return ok("Point added!", points=points)


@router.get("/ranking")
async def ranking(ctx: AppContext = Depends(get_context)):
    """Leaderboard of the top users by points."""
    entries = await ctx.ranking.compute(limit=ctx.settings.RANKING_LIMIT)
    return ok(ranking=[entry.to_dict() for entry in entries], total=len(entries))
