# server/models/user.py

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from . import Base


DEFAULT_STAT = 5
STAT_NAMES = ("strength", "stamina", "agility")


def _utcnow():
    return datetime.now(timezone.utc)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for heroes.
    Holds credentials, progression (xp, level, stats) and owns the
    per-day water log and the workout history.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    hero_name = Column(String, nullable=False)

    strength = Column(Integer, nullable=False, default=DEFAULT_STAT)
    stamina = Column(Integer, nullable=False, default=DEFAULT_STAT)
    agility = Column(Integer, nullable=False, default=DEFAULT_STAT)
    level = Column(Integer, nullable=False, default=1)
    xp = Column(Integer, nullable=False, default=0)

    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow)

    water_intake = relationship(
        "WaterEntry",
        back_populates="user",
        order_by="WaterEntry.id",
        cascade="all, delete-orphan",
    )
    workouts = relationship(
        "WorkoutEntry",
        back_populates="user",
        order_by="WorkoutEntry.id",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

    def __init__(self, **kwargs):
        # Column defaults only apply on flush; start from them right away so
        # progression works on transient users too.
        for stat in STAT_NAMES:
            kwargs.setdefault(stat, DEFAULT_STAT)
        kwargs.setdefault("level", 1)
        kwargs.setdefault("xp", 0)
        super().__init__(**kwargs)

    @property
    def stats(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in STAT_NAMES}
