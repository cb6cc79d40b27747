"""Application wiring."""
import logging
import random
from typing import Optional

from sqlalchemy.orm import Session

from vocard.config import settings
from vocard.models.base import SessionLocal, init_db
from vocard.monitoring import start_monitoring
from vocard.services.priority_ranker import PriorityRanker
from vocard.services.progress_store import Clock, ProgressStore
from vocard.services.quiz_generator import QuizGenerator
from vocard.services.quiz_service import QuizService
from vocard.services.storage_provider import SqlStorageProvider
from vocard.services.study_service import StudyService
from vocard.services.vocabulary_service import VocabularyCatalog, VocabularyService


class Vocard:
    """Main application class holding one store handle and the services built on it."""

    def __init__(
        self,
        db: Optional[Session] = None,
        catalog: Optional[VocabularyCatalog] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the application."""
        self.logger = logging.getLogger(__name__)
        self._owns_db = db is None
        if db is None:
            init_db()
            db = SessionLocal()
            self.logger.info("Database initialized")
        self.db = db

        self.catalog = catalog or VocabularyCatalog.from_file()
        self.store = ProgressStore(SqlStorageProvider(self.db), clock=clock)
        self.ranker = PriorityRanker(self.store, clock=clock)
        self.generator = QuizGenerator(self.ranker, rng=rng)
        self.vocabulary = VocabularyService(self.catalog, self.store)
        self.study = StudyService(self.store, self.catalog)
        self.quiz = QuizService(self.store, self.generator, self.catalog)

    def start_monitoring(self) -> None:
        if settings.monitoring.port:
            start_monitoring(settings.monitoring.port)
            self.logger.info(f"Metrics server listening on port {settings.monitoring.port}")

    def close(self) -> None:
        """Release the database session if the application opened it."""
        if self._owns_db:
            self.db.close()
