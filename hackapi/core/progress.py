"""
core/progress.py – ProgressService class.
Per-learner game counters in sqlite (SQLAlchemy ORM).

Blocking calls are wrapped in run_in_executor so the event loop is not blocked.
"""
import asyncio
import logging
from pathlib import Path

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from ..db.models import Progress
from ..db.session import db_session
from ..models import GameStats, ProgressStats

logger = logging.getLogger(__name__)


def quiz_verdict(correct: int, total: int) -> str:
    """Message shown at the end of a quiz."""
    if correct == total:
        return "Perfect! 🌟"
    if correct >= total * 0.8:
        return "Great job! 👏"
    if correct >= total * 0.6:
        return "Good effort! 💪"
    return "Keep practicing! 📚"


class ProgressService:
    """Read/increment learner progress. Unknown learners read as all zeros."""

    def __init__(self, data_dir: str | Path) -> None:
        self._db_path = Path(data_dir) / "progress.db"

    # ── Public API ─────────────────────────────────────────────────────────────

    async def get(self, learner_id: str) -> ProgressStats:
        return await self._run(self._get, learner_id)

    async def record_flashcards(self, learner_id: str, count: int = 1) -> ProgressStats:
        if count < 1:
            raise ValueError("count must be >= 1")
        return await self._run(self._record_flashcards, learner_id, count)

    async def record_memory(self, learner_id: str, score: int) -> ProgressStats:
        if score < 0:
            raise ValueError("score must be >= 0")
        return await self._run(self._record_memory, learner_id, score)

    async def record_quiz(self, learner_id: str, correct: int, total: int) -> ProgressStats:
        if total < 1 or not 0 <= correct <= total:
            raise ValueError("correct must be between 0 and total")
        return await self._run(self._record_quiz, learner_id, correct)

    async def reset(self, learner_id: str) -> None:
        await self._run(self._reset, learner_id)

    def init_db(self) -> None:
        """Create the sqlite file + tables (also done lazily on first session)."""
        with db_session(self._db_path):
            pass

    # ── Private: ORM ───────────────────────────────────────────────────────────
    # Counters are bumped in SQL (col = col + n); rows come from INSERT .. ON CONFLICT DO NOTHING.

    async def _run(self, fn, *args):
        return await asyncio.get_event_loop().run_in_executor(None, fn, *args)

    def _get(self, learner_id: str) -> ProgressStats:
        with db_session(self._db_path) as session:
            row = session.get(Progress, learner_id)
            return self._to_stats(row) if row else ProgressStats(learner_id=learner_id)

    def _record_flashcards(self, learner_id: str, count: int) -> ProgressStats:
        return self._increment(learner_id, flashcards_viewed=Progress.flashcards_viewed + count)

    def _record_memory(self, learner_id: str, score: int) -> ProgressStats:
        stats = self._increment(
            learner_id,
            total_games_completed=Progress.total_games_completed + 1,
            memory_games=Progress.memory_games + 1,
            memory_last_score=score,
            memory_best_score=func.max(Progress.memory_best_score, score),
        )
        logger.info("[Progress] %s memory game #%d score=%d", learner_id, stats.memory_match.games, score)
        return stats

    def _record_quiz(self, learner_id: str, correct: int) -> ProgressStats:
        stats = self._increment(
            learner_id,
            total_games_completed=Progress.total_games_completed + 1,
            quiz_games=Progress.quiz_games + 1,
            quiz_last_score=correct,
            quiz_best_score=func.max(Progress.quiz_best_score, correct),
        )
        logger.info("[Progress] %s quiz #%d score=%d", learner_id, stats.quiz.games, correct)
        return stats

    def _reset(self, learner_id: str) -> None:
        with db_session(self._db_path) as session:
            session.execute(delete(Progress).where(Progress.learner_id == learner_id))

    def _increment(self, learner_id: str, **values) -> ProgressStats:
        """Create the learner row if missing, apply `values` in one UPDATE, return the new row."""
        with db_session(self._db_path) as session:
            session.execute(
                sqlite_insert(Progress)
                .values(learner_id=learner_id)
                .on_conflict_do_nothing(index_elements=[Progress.learner_id])
            )
            session.execute(
                update(Progress)
                .where(Progress.learner_id == learner_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            row = session.execute(select(Progress).where(Progress.learner_id == learner_id)).scalar_one()
            return self._to_stats(row)

    # ── Private: Converters ────────────────────────────────────────────────────

    @staticmethod
    def _to_stats(row: Progress) -> ProgressStats:
        return ProgressStats(
            learner_id=row.learner_id,
            total_games_completed=row.total_games_completed,
            flashcards_viewed=row.flashcards_viewed,
            memory_match=GameStats(
                games=row.memory_games, best_score=row.memory_best_score, last_score=row.memory_last_score
            ),
            quiz=GameStats(games=row.quiz_games, best_score=row.quiz_best_score, last_score=row.quiz_last_score),
        )
