# server/api/profile.py

from fastapi import APIRouter, Depends

from api.auth import get_current_user
from models.user import User


router = APIRouter()


def serialize_user(user: User) -> dict:
    """
    Public view of a user document. The credential hash never leaves
    the server.
    """
    return {
        "id": user.id,
        "email": user.email,
        "heroName": user.hero_name,
        "stats": user.stats,
        "level": user.level,
        "xp": user.xp,
        "waterIntake": [
            {"date": entry.date, "cups": entry.cups}
            for entry in user.water_intake
        ],
        "workouts": [
            {
                "name": workout.name,
                "reps": workout.reps,
                "weight": workout.weight,
                "xp": workout.xp,
                "date": workout.date.isoformat() if workout.date else None,
            }
            for workout in user.workouts
        ],
    }


@router.get("/profile")
def read_profile(user: User = Depends(get_current_user)):
    return serialize_user(user)
