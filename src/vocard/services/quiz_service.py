"""Quiz sessions: generation, answering and summary."""
import logging
from typing import Optional

from vocard.models.quiz_models import QuestionType
from vocard.models.session_models import QuizResult, QuizSession, QuizSummary
from vocard.services import session_scorer
from vocard.services.progress_store import ProgressStore
from vocard.services.quiz_generator import QuizGenerator
from vocard.services.vocabulary_service import VocabularyCatalog

logger = logging.getLogger(__name__)


class QuizService:
    """Runs a quiz over a vocabulary set and records each answer."""

    def __init__(self, store: ProgressStore, generator: QuizGenerator, catalog: VocabularyCatalog):
        self.store = store
        self.generator = generator
        self.catalog = catalog

    def start(
        self,
        set_id: Optional[str] = None,
        count: Optional[int] = None,
        question_type: QuestionType = QuestionType.DEFINITION,
    ) -> QuizSession:
        """Generate a quiz for a set and start a study session.

        Raises:
            VocabularySetNotFoundError: If the set does not exist.
            InsufficientWordsError: If the set has too few words for a quiz.
        """
        vocabulary_set = self.catalog.require_set(set_id)
        questions = self.generator.generate(vocabulary_set.words, count, question_type)
        self.store.start_session()
        return QuizSession(
            set_id=vocabulary_set.id,
            questions=questions,
            start_time=self.store.clock().isoformat(),
        )

    def answer(self, session: QuizSession, selected_index: int, response_time: float) -> QuizResult:
        """Record the answer to the current question."""
        question = session.current_question
        if session.end_time is not None or question is None:
            raise ValueError("Quiz session is already finished")
        if not 0 <= selected_index < len(question.options):
            raise ValueError(f"Option {selected_index} is out of range for question {question.id}")

        correct = question.is_correct(selected_index)
        self.store.record_quiz_answer(question.word.id, correct, response_time)
        result = QuizResult(
            question_id=question.id,
            word_id=question.word.id,
            correct=correct,
            response_time=response_time,
            selected_index=selected_index,
        )
        session.results.append(result)
        return result

    def finish(self, session: QuizSession) -> QuizSummary:
        """End the quiz and summarize the results."""
        if session.end_time is None:
            session.end_time = self.store.clock().isoformat()
        summary = session_scorer.summarize(session)
        logger.info(
            f"Finished quiz for set {session.set_id}: {summary.correct_count}/{summary.total_count} "
            f"correct, rating {summary.rating}"
        )
        return summary
