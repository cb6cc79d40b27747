"""Quiz generation with review-priority word selection."""
import logging
import random
from typing import List, Optional, Sequence

from vocard.config import settings
from vocard.models.quiz_models import QuestionType, QuizQuestion
from vocard.models.vocabulary_models import Word
from vocard.monitoring import quiz_generation_failures, quizzes_generated
from vocard.services.priority_ranker import PriorityRanker

logger = logging.getLogger(__name__)


class InsufficientWordsError(ValueError):
    """Raised when there are too few words to build multiple-choice questions."""


def option_text(word: Word, question_type: QuestionType) -> str:
    """Text shown as an answer option for ``word``."""
    if question_type == QuestionType.DEFINITION:
        return word.definition
    return word.term


class QuizGenerator:
    """Builds multiple-choice quizzes, favouring words that need review."""

    def __init__(self, ranker: PriorityRanker, rng: Optional[random.Random] = None):
        """Initialize the generator with a ranker and an optional random source."""
        self.ranker = ranker
        self.rng = rng or random.Random()

    def _shuffled(self, items: Sequence) -> list:
        """Uniformly permuted copy of ``items`` (random.shuffle is Fisher-Yates)."""
        result = list(items)
        self.rng.shuffle(result)
        return result

    def generate(
        self,
        words: Sequence[Word],
        count: Optional[int] = None,
        question_type: QuestionType = QuestionType.DEFINITION,
    ) -> List[QuizQuestion]:
        """Generate up to ``count`` questions for the highest-priority words."""
        if count is None:
            count = settings.quiz.default_question_count
        if len(words) < settings.quiz.min_words:
            quiz_generation_failures.inc()
            raise InsufficientWordsError(
                f"Need at least {settings.quiz.min_words} words to generate a quiz, got {len(words)}"
            )

        words_by_id = {}
        for word in words:
            words_by_id.setdefault(word.id, word)
        prioritized_ids = self.ranker.rank([word.id for word in words])
        selected_ids = prioritized_ids[:max(0, min(count, len(words)))]

        questions = [
            self._generate_question(words_by_id[word_id], words, question_type, f"q-{index}")
            for index, word_id in enumerate(selected_ids)
        ]
        quizzes_generated.labels(question_type=question_type.value).inc()
        logger.info(f"Generated quiz with {len(questions)} {question_type.value} questions from {len(words)} words")
        return self._shuffled(questions)

    def _generate_question(
        self, target: Word, all_words: Sequence[Word], question_type: QuestionType, question_id: str
    ) -> QuizQuestion:
        correct_answer = option_text(target, question_type)
        others = [word for word in all_words if word.id != target.id]
        distractors = self._select_distractors(others, correct_answer, question_type)

        options = self._shuffled([correct_answer] + [option_text(word, question_type) for word in distractors])
        return QuizQuestion(
            id=question_id,
            word=target,
            question_type=question_type,
            options=options,
            correct_index=options.index(correct_answer),
        )

    def _select_distractors(
        self, candidates: Sequence[Word], correct_answer: str, question_type: QuestionType
    ) -> List[Word]:
        """Sample distractors whose option texts differ from each other and from the answer."""
        seen = {correct_answer}
        pool = []
        for word in candidates:
            text = option_text(word, question_type)
            if text not in seen:
                seen.add(text)
                pool.append(word)

        count = settings.quiz.distractor_count
        if len(pool) < count:
            quiz_generation_failures.inc()
            raise InsufficientWordsError(
                f"Only {len(pool)} distinct distractors available for '{correct_answer}', need {count}"
            )
        return self.rng.sample(pool, count)
