"""Models for quiz questions."""
from dataclasses import dataclass
from enum import Enum
from typing import List

from vocard.models.vocabulary_models import Word


class QuestionType(Enum):
    """What a question asks the user to pick."""
    DEFINITION = "definition"  # Show the term, choose the definition
    TERM = "term"  # Show the definition, choose the term


@dataclass
class QuizQuestion:
    """Multiple-choice question generated for one word. Never persisted."""
    id: str
    word: Word
    question_type: QuestionType
    options: List[str]
    correct_index: int

    @property
    def prompt(self) -> str:
        if self.question_type == QuestionType.DEFINITION:
            return self.word.term
        return self.word.definition

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    def is_correct(self, selected_index: int) -> bool:
        return selected_index == self.correct_index
