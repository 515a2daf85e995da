# server/api/tracking.py

import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

import config
from api.auth import get_current_user
from core.hydration import cups_for_day, log_water, today_utc
from core.progression import Workout, grant_xp, log_workout
from database import get_db, save_user
from models.user import User


logger = logging.getLogger(__name__)

router = APIRouter()


# Per-request ceilings keep stored totals well inside 64-bit integers.
MAX_CUPS_PER_LOG = 100
MAX_REPS = 10_000
MAX_WEIGHT = 10_000
MAX_WORKOUT_XP = 100_000


class WaterLogRequest(BaseModel):
    cups: int = Field(ge=0, le=MAX_CUPS_PER_LOG)


class WorkoutLogRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    reps: int = Field(ge=0, le=MAX_REPS)
    weight: float = Field(ge=0, le=MAX_WEIGHT, allow_inf_nan=False)
    xp: int = Field(ge=0, le=MAX_WORKOUT_XP)


@router.post("/log-water")
def log_water_intake(
    req: WaterLogRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    result = log_water(user.water_intake, today_utc(), req.cups)
    grant_xp(user, result.xp_bonus)
    save_user(db, user)

    logger.debug("User %s logged %d cups (+%d xp)", user.id, req.cups, result.xp_bonus)
    return {"success": True, "message": "Water logged successfully"}


@router.get("/today-water")
def today_water(user: User = Depends(get_current_user)):
    return {"cups": cups_for_day(user.water_intake, today_utc()), "goal": config.WATER_GOAL_CUPS}


@router.post("/log-workout")
def log_workout_session(
    req: WorkoutLogRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    result = log_workout(user, Workout(name=req.name, reps=req.reps, weight=req.weight, xp=req.xp))
    save_user(db, user)

    return {
        "success": True,
        "message": "Workout logged successfully",
        "leveledUp": result.leveled_up,
        "newLevel": result.new_level if result.leveled_up else None,
    }
