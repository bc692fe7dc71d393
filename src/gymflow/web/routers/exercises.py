"""Exercise catalog routes."""

from fastapi import APIRouter, Depends

from ..context import AppContext, get_context

router = APIRouter(tags=["exercises"])


@router.get("/exercicios")
async def list_exercises(ctx: AppContext = Depends(get_context)):
    """Full catalog, alphabetical. Returned as a bare list for the mobile client."""
    exercises = await ctx.exercises.list_all()
    return [exercise.to_dict() for exercise in exercises]
