"""Flashcard study sessions."""
import logging
from typing import Optional

from vocard.models.progress_models import MasteryStatus
from vocard.models.session_models import StudyResult, StudySession
from vocard.services.progress_store import ProgressStore
from vocard.services.vocabulary_service import VocabularyCatalog

logger = logging.getLogger(__name__)


class StudyService:
    """Runs flashcards over the words of a vocabulary set."""

    def __init__(self, store: ProgressStore, catalog: VocabularyCatalog):
        self.store = store
        self.catalog = catalog

    def start(self, set_id: Optional[str] = None) -> StudySession:
        """Start a flashcard session over a set; the first set when no ID is given."""
        vocabulary_set = self.catalog.require_set(set_id)
        progress = self.store.get()
        statuses = {
            word.id: progress.words[word.id].status if word.id in progress.words else MasteryStatus.NEW
            for word in vocabulary_set.words
        }
        self.store.start_session()
        logger.info(f"Started flashcards for set {vocabulary_set.id} with {len(vocabulary_set.words)} words")
        return StudySession(set_id=vocabulary_set.id, words=list(vocabulary_set.words), statuses=statuses)

    def answer(self, session: StudySession, remembered: bool) -> StudyResult:
        """Record the answer to the current card and move to the next one."""
        word = session.current_word
        if word is None:
            raise ValueError("Study session is already finished")

        word_progress = self.store.record_flashcard_answer(word.id, remembered)
        session.statuses[word.id] = word_progress.status
        result = StudyResult(word_id=word.id, term=word.term, remembered=remembered)
        session.results.append(result)
        return result
