"""Test configuration."""
import os
import random
from datetime import datetime, timedelta, UTC
from typing import Callable, Generator, List

import pytest
from faker import Faker

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Import after environment setup
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vocard.models.base import Base, init_db
from vocard.models.vocabulary_models import VocabularySet, Word
from vocard.services.priority_ranker import PriorityRanker
from vocard.services.progress_store import ProgressStore
from vocard.services.quiz_generator import QuizGenerator
from vocard.services.storage_provider import SqlStorageProvider
from vocard.services.vocabulary_service import VocabularyCatalog

fake = Faker()

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def engine():
    """In-memory database shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def provider(db: Session) -> SqlStorageProvider:
    return SqlStorageProvider(db, key="test_progress")


@pytest.fixture
def store(provider: SqlStorageProvider, clock: FrozenClock) -> ProgressStore:
    return ProgressStore(provider, clock=clock)


@pytest.fixture
def ranker(store: ProgressStore, clock: FrozenClock) -> PriorityRanker:
    return PriorityRanker(store, clock=clock)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generator(ranker: PriorityRanker, rng: random.Random) -> QuizGenerator:
    return QuizGenerator(ranker, rng=rng)


@pytest.fixture
def make_words() -> Callable[[int], List[Word]]:
    """Factory for words with distinct terms and definitions."""
    counter = iter(range(1, 10_000))

    def _make_words(count: int) -> List[Word]:
        words = []
        for _ in range(count):
            number = next(counter)
            words.append(Word(
                id=f"w-{number}",
                term=f"{fake.word()}-{number}",
                pronunciation=f"/{fake.word()}/",
                definition=f"{fake.sentence(nb_words=6)} ({number})",
                example=fake.sentence(),
                difficulty=fake.random_int(min=1, max=3),
                category=fake.random_element(["noun", "verb", "adjective"]),
            ))
        return words

    return _make_words


@pytest.fixture
def catalog(make_words) -> VocabularyCatalog:
    """Catalog with a regular set, a four-word set and a three-word set."""
    return VocabularyCatalog([
        VocabularySet(id="main", title="Main", description=fake.sentence(), words=tuple(make_words(8))),
        VocabularySet(id="four", title="Four", description=fake.sentence(), words=tuple(make_words(4))),
        VocabularySet(id="tiny", title="Tiny", description=fake.sentence(), words=tuple(make_words(3))),
    ])
