# server/core/progression.py

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.errors import ValidationError
from models import WorkoutEntry
from models.user import STAT_NAMES


logger = logging.getLogger(__name__)

XP_PER_LEVEL = 1000
STAT_GAIN_ON_LEVEL_UP = 1


@dataclass
class ProgressionResult:
    new_xp: int
    new_level: int
    leveled_up: bool
    stat_delta: dict[str, int] = field(default_factory=dict)


@dataclass
class Workout:
    name: str
    reps: int
    weight: float
    xp: int


def level_for_xp(xp: int) -> int:
    return xp // XP_PER_LEVEL + 1


def apply_xp(user, delta_xp: int) -> ProgressionResult:
    """
    Computes the progression of a user gaining ``delta_xp`` points.

    A level-up grants a flat bonus to every stat once per call, no matter
    how many level thresholds the gain crosses. The user is not modified.
    """
    if delta_xp < 0:
        raise ValidationError("XP gain must not be negative")

    new_xp = user.xp + delta_xp
    new_level = level_for_xp(new_xp)
    leveled_up = new_level > user.level
    gain = STAT_GAIN_ON_LEVEL_UP if leveled_up else 0

    return ProgressionResult(
        new_xp=new_xp,
        new_level=new_level,
        leveled_up=leveled_up,
        stat_delta={name: gain for name in STAT_NAMES},
    )


def grant_xp(user, delta_xp: int) -> ProgressionResult:
    """Applies ``apply_xp`` to the user in place and returns the result."""
    result = apply_xp(user, delta_xp)

    user.xp = result.new_xp
    if result.leveled_up:
        user.level = result.new_level
        for name, gain in result.stat_delta.items():
            setattr(user, name, getattr(user, name) + gain)
        logger.info("User %s reached level %d", user.id, result.new_level)

    return result


def log_workout(user, workout: Workout) -> ProgressionResult:
    user.workouts.append(WorkoutEntry(
        name=workout.name,
        reps=workout.reps,
        weight=workout.weight,
        xp=workout.xp,
        date=datetime.now(timezone.utc),
    ))
    return grant_xp(user, workout.xp)
