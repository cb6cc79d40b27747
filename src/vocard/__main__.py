"""Console front end for the trainer."""
import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from vocard.app import Vocard
from vocard.config import settings
from vocard.logging_config import setup_logging
from vocard.models.quiz_models import QuestionType
from vocard.services.quiz_generator import InsufficientWordsError
from vocard.services.session_scorer import format_time
from vocard.services.vocabulary_service import VocabularySetNotFoundError

logger = logging.getLogger(__name__)

RATING_LABELS = {
    "excellent": "Excellent!",
    "good": "Good Job!",
    "fair": "Keep Practicing",
    "needs-practice": "Don't Give Up!",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vocard", description="Vocabulary flashcards and quizzes")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sets", help="List vocabulary sets with progress")

    study = subparsers.add_parser("study", help="Study a set with flashcards")
    study.add_argument("--set", dest="set_id", default=None)

    quiz = subparsers.add_parser("quiz", help="Take a multiple-choice quiz")
    quiz.add_argument("--set", dest="set_id", default=None)
    quiz.add_argument("--count", type=int, default=settings.quiz.default_question_count)
    quiz.add_argument(
        "--type",
        dest="question_type",
        choices=[question_type.value for question_type in QuestionType],
        default=QuestionType.DEFINITION.value,
    )

    subparsers.add_parser("reset", help="Clear all progress")
    return parser


def show_sets(app: Vocard) -> None:
    for vocabulary_set, stats in app.vocabulary.get_sets_with_statistics():
        print(f"{vocabulary_set.id:<24} {vocabulary_set.title}")
        print(f"    mastered {stats.mastered}  learning {stats.learning}  new {stats.new}  / {stats.total}")
    overall = app.vocabulary.get_overall_statistics()
    print(f"\nOverall: {overall.mastered} mastered, {overall.learning} learning of {overall.total} words")


def run_study(app: Vocard, set_id: Optional[str], read: Callable[[str], str] = input) -> None:
    session = app.study.start(set_id)
    while not session.is_finished:
        word = session.current_word
        print(f"\n{word.term}  {word.pronunciation}  [{session.statuses[word.id].value}]")
        read("Press Enter to flip...")
        print(f"{word.definition}\n  e.g. {word.example}")
        answer = read("Did you remember it? [y/n] ").strip().lower()
        app.study.answer(session, answer.startswith("y"))

    summary = session.summary()
    print(f"\nRemembered {summary.remembered_count}, still learning {summary.forgot_count}")


def run_quiz(
    app: Vocard,
    set_id: Optional[str],
    count: int,
    question_type: QuestionType,
    read: Callable[[str], str] = input,
) -> None:
    session = app.quiz.start(set_id, count, question_type)
    while not session.is_finished:
        question = session.current_question
        print(f"\n{session.current_index + 1}/{len(session.questions)}  {question.prompt}")
        for number, option in enumerate(question.options, start=1):
            print(f"  {number}. {option}")

        started = time.monotonic()
        selected = _read_choice(read, len(question.options))
        response_time = round((time.monotonic() - started) * 1000)

        result = app.quiz.answer(session, selected, response_time)
        print("Correct!" if result.correct else f"Wrong, the answer is: {question.correct_option}")

    summary = app.quiz.finish(session)
    print(f"\n{RATING_LABELS[summary.rating]}  {summary.accuracy}% "
          f"({summary.correct_count}/{summary.total_count}), "
          f"average {format_time(summary.average_response_time)}")
    if summary.incorrect_terms:
        print("Words to review: " + ", ".join(summary.incorrect_terms))


def _read_choice(read: Callable[[str], str], option_count: int) -> int:
    while True:
        raw = read(f"Your answer [1-{option_count}]: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= option_count:
            return int(raw) - 1
        print("Please enter a valid option number.")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the console front end."""
    args = build_parser().parse_args(argv)
    setup_logging("Starting Vocard ...", level=args.log_level)

    app = Vocard()
    app.start_monitoring()
    try:
        if args.command == "sets":
            show_sets(app)
        elif args.command == "study":
            run_study(app, args.set_id)
        elif args.command == "quiz":
            run_quiz(app, args.set_id, args.count, QuestionType(args.question_type))
        elif args.command == "reset":
            app.store.clear()
            print("All progress cleared.")
    except InsufficientWordsError as e:
        logger.warning(f"Quiz not generated: {e}")
        print("Not enough words in this set to build a quiz (at least 4 are needed).")
        return 1
    except VocabularySetNotFoundError as e:
        print(str(e))
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted, shutting down...")
        return 130
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
