"""Scoring of finished quiz sessions."""
import math
from typing import Iterable, Union

from vocard.models.session_models import QuizSession, QuizSummary

Number = Union[int, float]

EXCELLENT = "excellent"
GOOD = "good"
FAIR = "fair"
NEEDS_PRACTICE = "needs-practice"


def score(correct: int, total: int) -> int:
    """Percentage of correct answers, rounded half up; 0 for an empty session."""
    if total == 0:
        return 0
    return math.floor(100 * correct / total + 0.5)


def average(values: Iterable[Number]) -> float:
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)


def rating(accuracy: Number, average_response_time: Number) -> str:
    """Qualitative rating from accuracy (percent) and mean response time (ms)."""
    if accuracy >= 90 and average_response_time < 3000:
        return EXCELLENT
    elif accuracy >= 70:
        return GOOD
    elif accuracy >= 50:
        return FAIR
    return NEEDS_PRACTICE


def format_time(ms: Number) -> str:
    """Format a response time, e.g. ``"850ms"`` or ``"2.3s"``."""
    if ms < 1000:
        if isinstance(ms, float) and ms.is_integer():
            ms = int(ms)
        return f"{ms}ms"
    return f"{ms / 1000:.1f}s"


def summarize(session: QuizSession) -> QuizSummary:
    """Build the results summary of a quiz session."""
    results = session.results
    correct_count = sum(1 for result in results if result.correct)
    accuracy = score(correct_count, len(results))
    average_response_time = average(result.response_time for result in results)

    terms_by_question = {question.id: question.word.term for question in session.questions}
    incorrect_terms = [
        terms_by_question[result.question_id]
        for result in results
        if not result.correct and result.question_id in terms_by_question
    ]
    return QuizSummary(
        correct_count=correct_count,
        total_count=len(results),
        accuracy=accuracy,
        average_response_time=average_response_time,
        rating=rating(accuracy, average_response_time),
        incorrect_terms=incorrect_terms,
    )
