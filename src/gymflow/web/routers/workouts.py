"""Workout plan routes: workouts and the exercises logged in them."""

import logging

from fastapi import APIRouter, Depends

from ...models.workout import CardioDetails, GymDetails, Workout, WorkoutKind
from ..context import AppContext, get_context, require_session
from ..responses import ok
from ..schemas import (
    AddExerciseRequest,
    CardioDetailsRequest,
    CreateWorkoutRequest,
    GymDetailsRequest,
    PathId,
    UpdateWorkoutRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workouts"], dependencies=[Depends(require_session)])


@router.post("/createWorkout", status_code=201)
async def create_workout(body: CreateWorkoutRequest, ctx: AppContext = Depends(get_context)):
    """Create a gym or cardio workout for a user."""
    workout = Workout(
        user_id=body.userId,
        name=body.name,
        kind=WorkoutKind.parse(body.kind),
    )
    workout_id = await ctx.workouts.create(workout)
    logger.info("Created %s workout %s for user %s", workout.kind.value, workout_id, workout.user_id)
    return ok("Workout created successfully", status_code=201, workoutId=workout_id)


@router.get("/viewWorkouts/{user_id}")
async def list_workouts(user_id: PathId, ctx: AppContext = Depends(get_context)):
    """All of a user's workouts, gym and cardio together."""
    workouts = await ctx.workouts.list_for_user(user_id)
    return ok(workouts=[w.to_dict() for w in workouts])


@router.put("/updateWorkout/{workout_id}")
async def rename_workout(
    workout_id: PathId,
    body: UpdateWorkoutRequest,
    ctx: AppContext = Depends(get_context),
):
    """Rename a workout."""
    kind = WorkoutKind.parse(body.kind)
    await ctx.workouts.rename(workout_id, kind, body.name)
    return ok("Workout updated")


@router.delete("/deleteWorkout/{workout_id}/{kind}")
async def delete_workout(workout_id: PathId, kind: str, ctx: AppContext = Depends(get_context)):
    """Delete a workout and every exercise logged in it."""
    workout_kind = WorkoutKind.parse(kind)
    await ctx.workouts.delete(workout_id, workout_kind)
    logger.info("Deleted %s workout %s", workout_kind.value, workout_id)
    return ok("Workout and its exercises deleted successfully")


@router.post("/addExerciseToWorkout", status_code=201)
async def add_exercise(body: AddExerciseRequest, ctx: AppContext = Depends(get_context)):
    """Add a catalog exercise to a workout. Each exercise may appear once."""
    kind = WorkoutKind.parse(body.kind)
    association_id = await ctx.workout_exercises.add(
        workout_id=body.workoutId,
        kind=kind,
        exercise_id=body.exerciseId,
        user_id=body.userId if kind is WorkoutKind.GYM else None,
    )
    return ok(
        "Exercise added to workout successfully",
        status_code=201,
        associationId=association_id,
    )


@router.get("/workoutExercises/{workout_id}/{kind}")
async def list_workout_exercises(
    workout_id: PathId, kind: str, ctx: AppContext = Depends(get_context)
):
    """Exercises of a workout, newest first, in the shape of its kind."""
    entries = await ctx.workout_exercises.list_for_workout(workout_id, WorkoutKind.parse(kind))
    return ok(exercises=[entry.to_dict() for entry in entries])


@router.post("/updateExerciseDetails")
async def update_gym_details(body: GymDetailsRequest, ctx: AppContext = Depends(get_context)):
    """Log weight, reps and sets for a gym exercise. All three are overwritten."""
    details = GymDetails.parse(body.weight, body.reps, body.sets)
    affected = await ctx.workout_exercises.update_gym_details(body.associationId, details)
    return ok("Details updated successfully", affectedRows=affected)


@router.post("/updateCardioExerciseDetails")
async def update_cardio_details(
    body: CardioDetailsRequest, ctx: AppContext = Depends(get_context)
):
    """Log description, distance and type for a cardio exercise."""
    details = CardioDetails.parse(body.description, body.distance, body.type)
    affected = await ctx.workout_exercises.update_cardio_details(body.associationId, details)
    return ok("Details updated successfully", affectedRows=affected)


@router.delete("/deleteExercise/{association_id}/{kind}")
async def delete_exercise(
    association_id: PathId, kind: str, ctx: AppContext = Depends(get_context)
):
    """Remove one exercise from a workout."""
    await ctx.workout_exercises.delete(association_id, WorkoutKind.parse(kind))
    return ok("Exercise removed successfully")
