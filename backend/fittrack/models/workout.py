from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from fittrack.db import Base


class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # No ondelete: users with workouts cannot be removed
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # running, cycling, swimming, hiit, strength, other
    type = Column(String(20), nullable=False)
    name = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)

    duration = Column(Integer, nullable=False)  # minutes
    distance = Column(Float, nullable=True)     # miles
    calories = Column(Integer, nullable=True)
    notes = Column(String, nullable=True)
