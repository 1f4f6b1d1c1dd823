from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from fittrack.db import Base


class Measurement(Base):
    __tablename__ = "measurements"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(DateTime(timezone=True), nullable=False)

    # Every metric is optional; a record may capture only a subset
    weight = Column(Float, nullable=True)    # lbs
    body_fat = Column(Float, nullable=True)  # percentage
    chest = Column(Float, nullable=True)     # inches
    waist = Column(Float, nullable=True)
    hips = Column(Float, nullable=True)
    arms = Column(Float, nullable=True)
    thighs = Column(Float, nullable=True)

    notes = Column(String, nullable=True)
