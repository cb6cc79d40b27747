"""Progress store for per-word mastery state."""
import logging
import math
import threading
from datetime import datetime, UTC
from typing import Callable, Iterable, List, Optional

from vocard.config import settings
from vocard.models.progress_models import (
    MasteryStatus,
    QuizAttempt,
    SetStatistics,
    UserProgress,
    WordProgress,
)
from vocard.monitoring import answers_recorded, storage_errors, study_sessions
from vocard.services.storage_provider import StorageProvider

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def compute_status(correct_count: int, incorrect_count: int) -> MasteryStatus:
    """Mastery status from the answer counters alone.

    Recomputed on every update, so a run of wrong answers can move a
    mastered word back to learning.
    """
    total = correct_count + incorrect_count
    if total == 0:
        return MasteryStatus.NEW
    rate = correct_count / total
    if rate >= settings.mastery.mastery_rate and total >= settings.mastery.min_attempts:
        return MasteryStatus.MASTERED
    return MasteryStatus.LEARNING


class ProgressStore:
    """Reads and updates the user progress document through a storage provider."""

    def __init__(self, provider: StorageProvider, clock: Optional[Clock] = None):
        """Initialize the store with a storage provider and an optional clock."""
        self.provider = provider
        self.clock = clock or utc_now
        self._lock = threading.RLock()

    def _timestamp(self) -> str:
        return self.clock().isoformat()

    def get(self) -> UserProgress:
        """Get the progress document, or an empty one if nothing usable is stored."""
        document = self.provider.load()
        if document is None:
            return UserProgress()
        try:
            return UserProgress.from_dict(document)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed progress document: {e}")
            storage_errors.labels(operation="parse").inc()
            return UserProgress()

    def set(self, progress: UserProgress) -> None:
        """Persist the whole progress document."""
        self.provider.save(progress.to_dict())

    def get_word_progress(self, word_id: str) -> WordProgress:
        """Get the stored record of a word or a default one (not persisted)."""
        return self.get().words.get(word_id) or WordProgress(word_id=word_id)

    def record_flashcard_answer(self, word_id: str, remembered: bool) -> WordProgress:
        """Update a word after a flashcard was answered."""
        with self._lock:
            progress = self.get()
            word_progress = progress.words.get(word_id) or WordProgress(word_id=word_id)

            if remembered:
                word_progress.correct_count += 1
            else:
                word_progress.incorrect_count += 1
            word_progress.status = compute_status(word_progress.correct_count, word_progress.incorrect_count)
            word_progress.last_studied = self._timestamp()

            progress.words[word_id] = word_progress
            self.set(progress)

        answers_recorded.labels(mode="flashcard", result="correct" if remembered else "incorrect").inc()
        logger.debug(f"Flashcard answer for {word_id}: remembered={remembered}, status={word_progress.status.value}")
        return word_progress

    def record_quiz_answer(self, word_id: str, correct: bool, response_time: float) -> WordProgress:
        """Update a word after a quiz question was answered."""
        if not math.isfinite(response_time) or response_time < 0:
            raise ValueError(f"Invalid response time {response_time!r} for word {word_id}")
        with self._lock:
            progress = self.get()
            word_progress = progress.words.get(word_id) or WordProgress(word_id=word_id)
            now = self._timestamp()

            word_progress.quiz_attempts.append(
                QuizAttempt(date=now, correct=correct, response_time=response_time)
            )
            if correct:
                word_progress.correct_count += 1
            else:
                word_progress.incorrect_count += 1

            attempts = word_progress.quiz_attempts
            word_progress.average_response_time = (
                sum(attempt.response_time for attempt in attempts) / len(attempts) if attempts else None
            )
            word_progress.status = compute_status(word_progress.correct_count, word_progress.incorrect_count)
            word_progress.last_studied = now

            progress.words[word_id] = word_progress
            self.set(progress)

        answers_recorded.labels(mode="quiz", result="correct" if correct else "incorrect").inc()
        logger.debug(f"Quiz answer for {word_id}: correct={correct}, status={word_progress.status.value}")
        return word_progress

    def start_session(self) -> UserProgress:
        """Stamp the start of a study session and count it."""
        with self._lock:
            progress = self.get()
            progress.last_study_session = self._timestamp()
            progress.total_study_sessions += 1
            self.set(progress)

        study_sessions.inc()
        logger.info(f"Started study session #{progress.total_study_sessions}")
        return progress

    def clear(self) -> None:
        """Remove all progress."""
        with self._lock:
            self.provider.clear()

    def get_set_statistics(self, word_ids: Iterable[str]) -> SetStatistics:
        """Count words per mastery status; words without a record count as new."""
        words = self.get().words
        stats = SetStatistics()
        for word_id in word_ids:
            stats.total += 1
            word_progress = words.get(word_id)
            if word_progress is None or word_progress.status == MasteryStatus.NEW:
                stats.new += 1
            elif word_progress.status == MasteryStatus.LEARNING:
                stats.learning += 1
            else:
                stats.mastered += 1
        return stats

    def get_words_needing_practice(self, word_ids: Iterable[str]) -> List[str]:
        """Order words so the ones most in need of review come first."""
        from vocard.services.priority_ranker import PriorityRanker

        return PriorityRanker(self, clock=self.clock).rank(word_ids)
