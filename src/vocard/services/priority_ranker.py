"""Review priority of words based on past answers and recency."""
import logging
from datetime import datetime, UTC
from typing import Dict, Iterable, List, Optional

from vocard.config import settings
from vocard.models.progress_models import WordProgress
from vocard.services.progress_store import Clock, ProgressStore, utc_now

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


def as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be in UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class PriorityRanker:
    """Orders words so the hardest and stalest come first."""

    def __init__(self, store: ProgressStore, clock: Optional[Clock] = None):
        """Initialize the ranker with a progress store and an optional clock."""
        self.store = store
        self.clock = clock or utc_now

    def _days_since(self, timestamp: Optional[str], now: datetime) -> float:
        """Fractional days since ``timestamp``; never-studied words count as long ago."""
        if timestamp is None:
            return settings.priority.never_studied_days
        try:
            studied = datetime.fromisoformat(timestamp)
        except ValueError:
            logger.warning(f"Unreadable lastStudied timestamp {timestamp!r}, treating as never studied")
            return settings.priority.never_studied_days
        return (as_utc(now) - as_utc(studied)).total_seconds() / SECONDS_PER_DAY

    def _priority(self, word_progress: Optional[WordProgress], now: datetime) -> float:
        if word_progress is None or word_progress.total_attempts == 0:
            return settings.priority.new_word_priority
        # Inaccuracy (0-100) plus staleness in days, unnormalized
        return (1 - word_progress.correct_rate) * 100 + self._days_since(word_progress.last_studied, now)

    def priority(self, word_id: str) -> float:
        """Get the review priority of a single word."""
        return self._priority(self.store.get().words.get(word_id), self.clock())

    def priorities(self, word_ids: Iterable[str]) -> Dict[str, float]:
        words = self.store.get().words
        now = self.clock()
        return {word_id: self._priority(words.get(word_id), now) for word_id in word_ids}

    def rank(self, word_ids: Iterable[str]) -> List[str]:
        """Get ``word_ids`` ordered by descending priority, keeping input order for ties."""
        word_ids = list(word_ids)
        priorities = self.priorities(word_ids)
        # sorted() is stable, so equal priorities keep their input order
        ranked = sorted(word_ids, key=lambda word_id: -priorities[word_id])
        logger.debug(f"Ranked {len(ranked)} words by review priority")
        return ranked
