"""Models for the read-only vocabulary catalog."""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Word:
    """Vocabulary entry."""
    id: str
    term: str
    pronunciation: str
    definition: str
    example: str
    difficulty: int  # 1: Easy, 2: Medium, 3: Hard
    category: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Word":
        difficulty = int(data.get("difficulty", 1))
        if difficulty not in (1, 2, 3):
            raise ValueError(f"Word {data.get('id')} has invalid difficulty {difficulty}")
        return cls(
            id=str(data["id"]),
            term=data["term"],
            pronunciation=data.get("pronunciation", ""),
            definition=data["definition"],
            example=data.get("example", ""),
            difficulty=difficulty,
            category=data.get("category", ""),
        )


@dataclass(frozen=True)
class VocabularySet:
    """Named, ordered group of words."""
    id: str
    title: str
    description: str
    words: Tuple[Word, ...]

    @property
    def word_ids(self) -> List[str]:
        return [word.id for word in self.words]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VocabularySet":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            words=tuple(Word.from_dict(word) for word in data.get("words", [])),
        )
