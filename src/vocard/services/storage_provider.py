"""Storage providers holding the progress document."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vocard.config import settings
from vocard.models.models import ProgressDocument
from vocard.monitoring import storage_errors

logger = logging.getLogger(__name__)


class StorageProvider(ABC):
    """Whole-document key-value persistence.

    Implementations read and write the document wholesale. ``load`` returns
    None when nothing usable is stored and must not raise for a malformed value.
    """

    @abstractmethod
    def load(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def save(self, document: Dict[str, Any]) -> None:
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError("Subclasses must implement this method")


class SqlStorageProvider(StorageProvider):
    """Stores the document as JSON text in the ``progress_documents`` table."""

    def __init__(self, db: Session, key: Optional[str] = None):
        """Initialize the provider with a database session."""
        self.db = db
        self.key = key or settings.storage.progress_key

    def _get_row(self) -> Optional[ProgressDocument]:
        return self.db.query(ProgressDocument).filter(ProgressDocument.key == self.key).first()

    def load(self) -> Optional[Dict[str, Any]]:
        try:
            row = self._get_row()
        except SQLAlchemyError as e:
            logger.error(f"Error reading progress document {self.key}: {e}")
            storage_errors.labels(operation="load").inc()
            self.db.rollback()
            return None
        if row is None:
            return None

        try:
            document = json.loads(row.value)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Progress document {self.key} is not valid JSON: {e}")
            storage_errors.labels(operation="parse").inc()
            return None
        if not isinstance(document, dict):
            logger.warning(f"Progress document {self.key} is not a JSON object")
            storage_errors.labels(operation="parse").inc()
            return None
        return document

    def save(self, document: Dict[str, Any]) -> None:
        value = json.dumps(document)
        try:
            row = self._get_row()
            if row is None:
                self.db.add(ProgressDocument(key=self.key, value=value))
            else:
                row.value = value
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error saving progress document {self.key}: {e}")
            storage_errors.labels(operation="save").inc()
            self.db.rollback()
            raise

    def clear(self) -> None:
        try:
            self.db.query(ProgressDocument).filter(ProgressDocument.key == self.key).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error clearing progress document {self.key}: {e}")
            storage_errors.labels(operation="clear").inc()
            self.db.rollback()
            raise
        logger.info(f"Cleared progress document {self.key}")
