"""Models for the persisted user progress document."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class MasteryStatus(Enum):
    """Proficiency label of a word."""
    NEW = "new"
    LEARNING = "learning"
    MASTERED = "mastered"


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    _require(value is None or isinstance(value, str), f"{key} must be a string or null")
    return value


@dataclass
class QuizAttempt:
    """One answered quiz question."""
    date: str  # ISO format datetime string
    correct: bool
    response_time: float  # in milliseconds

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "correct": self.correct, "responseTime": self.response_time}

    @classmethod
    def from_dict(cls, data: Any) -> "QuizAttempt":
        _require(isinstance(data, dict), "quiz attempt must be an object")
        _require(isinstance(data.get("date"), str), "attempt date must be a string")
        _require(isinstance(data.get("correct"), bool), "attempt correct must be a boolean")
        _require(_is_number(data.get("responseTime")), "attempt responseTime must be a number")
        return cls(date=data["date"], correct=data["correct"], response_time=data["responseTime"])


@dataclass
class WordProgress:
    """Mutable learning state of a single word."""
    word_id: str
    status: MasteryStatus = MasteryStatus.NEW
    correct_count: int = 0
    incorrect_count: int = 0
    last_studied: Optional[str] = None  # ISO format datetime string
    average_response_time: Optional[float] = None  # in milliseconds
    quiz_attempts: List[QuizAttempt] = field(default_factory=list)

    @property
    def total_attempts(self) -> int:
        return self.correct_count + self.incorrect_count

    @property
    def correct_rate(self) -> float:
        """Share of correct answers, 0.0 when the word was never answered."""
        if self.total_attempts == 0:
            return 0.0
        return self.correct_count / self.total_attempts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wordId": self.word_id,
            "status": self.status.value,
            "correctCount": self.correct_count,
            "incorrectCount": self.incorrect_count,
            "lastStudied": self.last_studied,
            "averageResponseTime": self.average_response_time,
            "quizAttempts": [attempt.to_dict() for attempt in self.quiz_attempts],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "WordProgress":
        """Build a record from its JSON form, raising ValueError on a malformed one."""
        _require(isinstance(data, dict), "word progress must be an object")
        _require(isinstance(data.get("wordId"), str), "wordId must be a string")
        for key in ("correctCount", "incorrectCount"):
            _require(_is_int(data.get(key)) and data[key] >= 0, f"{key} must be a non-negative integer")
        average = data.get("averageResponseTime")
        _require(average is None or _is_number(average), "averageResponseTime must be a number or null")
        attempts = data.get("quizAttempts", [])
        _require(isinstance(attempts, list), "quizAttempts must be a list")
        return cls(
            word_id=data["wordId"],
            status=MasteryStatus(data.get("status")),
            correct_count=data["correctCount"],
            incorrect_count=data["incorrectCount"],
            last_studied=_optional_str(data, "lastStudied"),
            average_response_time=average,
            quiz_attempts=[QuizAttempt.from_dict(attempt) for attempt in attempts],
        )


@dataclass
class UserProgress:
    """Root progress document, one per storage key."""
    words: Dict[str, WordProgress] = field(default_factory=dict)
    last_study_session: Optional[str] = None  # ISO format datetime string
    total_study_sessions: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "words": {word_id: progress.to_dict() for word_id, progress in self.words.items()},
            "lastStudySession": self.last_study_session,
            "totalStudySessions": self.total_study_sessions,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "UserProgress":
        """Build the document from its JSON form, raising ValueError on a malformed one."""
        _require(isinstance(data, dict), "progress document must be an object")
        words = data.get("words", {})
        _require(isinstance(words, dict), "words must be an object")
        sessions = data.get("totalStudySessions", 0)
        _require(_is_int(sessions) and sessions >= 0, "totalStudySessions must be a non-negative integer")
        return cls(
            words={word_id: WordProgress.from_dict(progress) for word_id, progress in words.items()},
            last_study_session=_optional_str(data, "lastStudySession"),
            total_study_sessions=sessions,
        )


@dataclass
class SetStatistics:
    """Mastery tallies for a group of words."""
    mastered: int = 0
    learning: int = 0
    new: int = 0
    total: int = 0

    def __add__(self, other: "SetStatistics") -> "SetStatistics":
        return SetStatistics(
            mastered=self.mastered + other.mastered,
            learning=self.learning + other.learning,
            new=self.new + other.new,
            total=self.total + other.total,
        )

    def to_dict(self) -> Dict[str, int]:
        return {"mastered": self.mastered, "learning": self.learning, "new": self.new, "total": self.total}
