from sqlalchemy import Column, Integer, String
from fittrack.db import Base


class User(Base):
    __tablename__ = "users"
    # AUTOINCREMENT keeps SQLite from handing a deleted max id out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)

    display_name = Column(String, nullable=True)
    profile_image = Column(String, nullable=True)
