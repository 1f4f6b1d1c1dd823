from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from fittrack.db import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=True)

    # weight, running, frequency, other
    type = Column(String(20), nullable=False)

    # Both values are in `unit`; their meaning is left to goal_metrics
    target = Column(Float, nullable=False)
    current = Column(Float, nullable=False)
    unit = Column(String, nullable=False)

    # NULL deadline = open-ended / recurring goal
    deadline = Column(DateTime(timezone=True), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False)
