"""Tests for flashcard and quiz sessions."""
import pytest

from vocard.models.progress_models import MasteryStatus
from vocard.models.quiz_models import QuestionType
from vocard.services.progress_store import ProgressStore
from vocard.services.quiz_generator import InsufficientWordsError, QuizGenerator
from vocard.services.quiz_service import QuizService
from vocard.services.study_service import StudyService
from vocard.services.vocabulary_service import VocabularyCatalog, VocabularySetNotFoundError


@pytest.fixture
def study_service(store: ProgressStore, catalog: VocabularyCatalog) -> StudyService:
    return StudyService(store, catalog)


@pytest.fixture
def quiz_service(store: ProgressStore, generator: QuizGenerator, catalog: VocabularyCatalog) -> QuizService:
    return QuizService(store, generator, catalog)


def test_study_session_walks_every_card(study_service: StudyService, store: ProgressStore) -> None:
    """Test a full flashcard run."""
    session = study_service.start("four")
    assert store.get().total_study_sessions == 1
    assert set(session.statuses.values()) == {MasteryStatus.NEW}

    answers = [True, False, True, True]
    for remembered in answers:
        word = session.current_word
        result = study_service.answer(session, remembered)
        assert result.word_id == word.id
        assert session.statuses[word.id] == MasteryStatus.LEARNING

    assert session.is_finished
    summary = session.summary()
    assert summary.remembered_count == 3
    assert summary.forgot_count == 1
    with pytest.raises(ValueError):
        study_service.answer(session, True)


def test_study_session_shows_stored_status(study_service: StudyService, store: ProgressStore, catalog) -> None:
    word = catalog.get_set("four").words[0]
    for _ in range(3):
        store.record_flashcard_answer(word.id, True)

    session = study_service.start("four")

    assert session.statuses[word.id] == MasteryStatus.MASTERED


def test_study_unknown_set(study_service: StudyService) -> None:
    with pytest.raises(VocabularySetNotFoundError):
        study_service.start("missing")


def test_quiz_with_four_words_and_count_ten(quiz_service: QuizService, store: ProgressStore) -> None:
    """Test that a four-word set yields four questions."""
    session = quiz_service.start("four", 10)

    assert len(session.questions) == 4
    assert session.set_id == "four"
    assert store.get().total_study_sessions == 1


def test_quiz_defaults_to_first_set_and_ten_questions(quiz_service: QuizService) -> None:
    session = quiz_service.start()
    assert session.set_id == "main"
    assert len(session.questions) == 8


def test_quiz_run_records_answers(quiz_service: QuizService, store: ProgressStore) -> None:
    """Test answering a full quiz and summarizing it."""
    session = quiz_service.start("four", 4, QuestionType.TERM)

    wrong_terms = []
    for number, question in enumerate(list(session.questions)):
        if number % 2 == 0:
            selected = question.correct_index
        else:
            selected = (question.correct_index + 1) % len(question.options)
            wrong_terms.append(question.word.term)
        result = quiz_service.answer(session, selected, 1000 + number * 500)
        assert result.correct == (number % 2 == 0)

    assert session.is_finished
    summary = quiz_service.finish(session)

    assert summary.correct_count == 2
    assert summary.total_count == 4
    assert summary.accuracy == 50
    assert summary.average_response_time == 1750
    assert summary.rating == "fair"
    assert summary.incorrect_terms == wrong_terms
    assert session.end_time is not None

    for question in session.questions:
        word_progress = store.get_word_progress(question.word.id)
        assert len(word_progress.quiz_attempts) == 1
        assert word_progress.status == MasteryStatus.LEARNING


def test_quiz_answer_validation(quiz_service: QuizService) -> None:
    """Test answers outside the options or after finishing."""
    session = quiz_service.start("four", 1)
    with pytest.raises(ValueError):
        quiz_service.answer(session, 4, 1000)
    with pytest.raises(ValueError):
        quiz_service.answer(session, -1, 1000)

    quiz_service.answer(session, 0, 1000)
    with pytest.raises(ValueError):
        quiz_service.answer(session, 0, 1000)


@pytest.mark.parametrize("response_time", [float("nan"), float("-inf"), -250])
def test_quiz_answer_rejects_invalid_response_time(
    quiz_service: QuizService, store: ProgressStore, response_time: float
) -> None:
    """Test that a refused response time leaves the session and progress untouched."""
    session = quiz_service.start("four", 1)
    with pytest.raises(ValueError):
        quiz_service.answer(session, 0, response_time)

    assert session.results == []
    assert session.current_question is session.questions[0]
    assert store.get().words == {}

def test_quiz_finished_early_cannot_be_answered(quiz_service: QuizService) -> None:
    session = quiz_service.start("four", 4)
    quiz_service.finish(session)
    with pytest.raises(ValueError):
        quiz_service.answer(session, 0, 1000)


def test_quiz_on_tiny_set_fails_without_starting_session(quiz_service: QuizService, store: ProgressStore) -> None:
    """Test that a set with three words is rejected."""
    with pytest.raises(InsufficientWordsError):
        quiz_service.start("tiny")
    assert store.get().total_study_sessions == 0
