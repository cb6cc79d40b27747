"""Models for study and quiz sessions."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from vocard.models.progress_models import MasteryStatus
from vocard.models.quiz_models import QuizQuestion
from vocard.models.vocabulary_models import Word


@dataclass
class QuizResult:
    """User's answer to one quiz question."""
    question_id: str
    word_id: str
    correct: bool
    response_time: float  # in milliseconds
    selected_index: int


@dataclass
class QuizSession:
    """A quiz in progress or finished."""
    set_id: str
    questions: List[QuizQuestion]
    start_time: str  # ISO format datetime string
    results: List[QuizResult] = field(default_factory=list)
    end_time: Optional[str] = None

    @property
    def current_index(self) -> int:
        return len(self.results)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.current_index >= len(self.questions):
            return None
        return self.questions[self.current_index]

    @property
    def is_finished(self) -> bool:
        return self.end_time is not None or self.current_question is None


@dataclass
class QuizSummary:
    """Results screen of a finished quiz."""
    correct_count: int
    total_count: int
    accuracy: int  # percent
    average_response_time: float  # in milliseconds
    rating: str
    incorrect_terms: List[str]


@dataclass
class StudyResult:
    """User's answer to one flashcard."""
    word_id: str
    term: str
    remembered: bool


@dataclass
class StudySummary:
    remembered_count: int
    forgot_count: int


@dataclass
class StudySession:
    """A flashcard run over the words of a vocabulary set."""
    set_id: str
    words: List[Word]
    statuses: Dict[str, MasteryStatus]
    results: List[StudyResult] = field(default_factory=list)

    @property
    def current_word(self) -> Optional[Word]:
        if len(self.results) >= len(self.words):
            return None
        return self.words[len(self.results)]

    @property
    def is_finished(self) -> bool:
        return self.current_word is None

    def summary(self) -> StudySummary:
        remembered = sum(1 for result in self.results if result.remembered)
        return StudySummary(remembered_count=remembered, forgot_count=len(self.results) - remembered)
