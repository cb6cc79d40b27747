"""Vocabulary catalog and per-set progress statistics."""
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from vocard.config import settings
from vocard.models.progress_models import SetStatistics
from vocard.models.vocabulary_models import VocabularySet
from vocard.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


class VocabularySetNotFoundError(LookupError):
    """Raised when a vocabulary set id is not in the catalog."""


class VocabularyCatalog:
    """Read-only collection of vocabulary sets."""

    def __init__(self, sets: Iterable[VocabularySet]):
        self._sets: Tuple[VocabularySet, ...] = tuple(sets)
        self._by_id = {vocabulary_set.id: vocabulary_set for vocabulary_set in self._sets}
        if len(self._by_id) != len(self._sets):
            raise ValueError("Vocabulary set ids must be unique")

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "VocabularyCatalog":
        """Load the catalog from a JSON file with a top-level ``sets`` list."""
        path = Path(path) if path else settings.catalog.vocabulary_file
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls(VocabularySet.from_dict(item) for item in data["sets"])
        logger.info(f"Loaded {len(catalog.sets)} vocabulary sets from {path}")
        return catalog

    @property
    def sets(self) -> List[VocabularySet]:
        return list(self._sets)

    @property
    def default_set(self) -> Optional[VocabularySet]:
        return self._sets[0] if self._sets else None

    def get_set(self, set_id: str) -> Optional[VocabularySet]:
        """Get a vocabulary set by its ID."""
        return self._by_id.get(set_id)

    def require_set(self, set_id: Optional[str]) -> VocabularySet:
        """Get a vocabulary set, falling back to the first one when no ID is given."""
        vocabulary_set = self.get_set(set_id) if set_id else self.default_set
        if vocabulary_set is None:
            raise VocabularySetNotFoundError(f"Vocabulary set {set_id} not found")
        return vocabulary_set


class VocabularyService:
    """Dashboard view of the catalog combined with stored progress."""

    def __init__(self, catalog: VocabularyCatalog, store: ProgressStore):
        self.catalog = catalog
        self.store = store

    def get_sets_with_statistics(self) -> List[Tuple[VocabularySet, SetStatistics]]:
        return [
            (vocabulary_set, self.store.get_set_statistics(vocabulary_set.word_ids))
            for vocabulary_set in self.catalog.sets
        ]

    def get_overall_statistics(self) -> SetStatistics:
        """Sum of the statistics of every set."""
        overall = SetStatistics()
        for _, stats in self.get_sets_with_statistics():
            overall = overall + stats
        return overall
