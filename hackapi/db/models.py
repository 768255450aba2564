"""
hackapi/db/models.py – SQLAlchemy ORM model for the `progress` table.

One row per learner. Tables are created by db_session() on first use.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Progress(Base):
    __tablename__ = "progress"

    learner_id            = Column(String,  primary_key=True)
    total_games_completed = Column(Integer, nullable=False, default=0)
    flashcards_viewed     = Column(Integer, nullable=False, default=0)
    memory_games          = Column(Integer, nullable=False, default=0)
    memory_best_score     = Column(Integer, nullable=False, default=0)
    memory_last_score     = Column(Integer, nullable=False, default=0)
    quiz_games            = Column(Integer, nullable=False, default=0)
    quiz_best_score       = Column(Integer, nullable=False, default=0)
    quiz_last_score       = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Progress learner_id={self.learner_id!r} games={self.total_games_completed}>"
