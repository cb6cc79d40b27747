"""Configuration settings for the trainer."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Bundled vocabulary catalog
PACKAGE_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_VOCABULARY_FILE = PACKAGE_DATA_DIR / "vocabulary.json"

# Key under which the progress document is stored
PROGRESS_STORAGE_KEY = "vocard_user_progress"


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///vocard.db"))
    echo: bool = field(default_factory=lambda: os.getenv("DATABASE_ECHO", "false").lower() == "true")


@dataclass
class StorageSettings:
    """Progress storage settings."""
    progress_key: str = field(default_factory=lambda: os.getenv("PROGRESS_STORAGE_KEY", PROGRESS_STORAGE_KEY))


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = field(default_factory=lambda: os.getenv("LOG_DIR", None))
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class CatalogSettings:
    """Vocabulary catalog settings."""
    vocabulary_file: Path = field(
        default_factory=lambda: Path(os.getenv("VOCABULARY_FILE", str(DEFAULT_VOCABULARY_FILE)))
    )


@dataclass
class QuizSettings:
    """Quiz generation settings."""
    default_question_count: int = field(default_factory=lambda: int(os.getenv("DEFAULT_QUESTION_COUNT", "10")))
    min_words: int = 4  # one correct answer plus three distractors
    distractor_count: int = 3


@dataclass
class MasterySettings:
    """Thresholds for the mastery status of a word."""
    mastery_rate: float = field(default_factory=lambda: float(os.getenv("MASTERY_RATE", "0.8")))
    min_attempts: int = field(default_factory=lambda: int(os.getenv("MASTERY_MIN_ATTEMPTS", "3")))


@dataclass
class PrioritySettings:
    """Review priority settings."""
    new_word_priority: float = field(default_factory=lambda: float(os.getenv("NEW_WORD_PRIORITY", "50")))
    never_studied_days: float = field(default_factory=lambda: float(os.getenv("NEVER_STUDIED_DAYS", "30")))


@dataclass
class MonitoringSettings:
    """Prometheus metrics settings."""
    port: int = field(default_factory=lambda: int(os.getenv("METRICS_PORT", "0")))  # 0 disables the server


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_storage_settings() -> StorageSettings:
    """Get storage settings."""
    return StorageSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_catalog_settings() -> CatalogSettings:
    """Get catalog settings."""
    return CatalogSettings()


def get_quiz_settings() -> QuizSettings:
    """Get quiz settings."""
    return QuizSettings()


def get_mastery_settings() -> MasterySettings:
    """Get mastery settings."""
    return MasterySettings()


def get_priority_settings() -> PrioritySettings:
    """Get priority settings."""
    return PrioritySettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    database: DatabaseSettings = field(default_factory=get_database_settings)
    storage: StorageSettings = field(default_factory=get_storage_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    catalog: CatalogSettings = field(default_factory=get_catalog_settings)
    quiz: QuizSettings = field(default_factory=get_quiz_settings)
    mastery: MasterySettings = field(default_factory=get_mastery_settings)
    priority: PrioritySettings = field(default_factory=get_priority_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if not self.storage.progress_key:
            raise ValueError("PROGRESS_STORAGE_KEY must not be empty")

        if self.quiz.default_question_count < 1:
            raise ValueError("DEFAULT_QUESTION_COUNT must be positive")

        if self.mastery.mastery_rate < 0 or self.mastery.mastery_rate > 1:
            raise ValueError("MASTERY_RATE must be between 0 and 1")

        if self.mastery.min_attempts < 1:
            raise ValueError("MASTERY_MIN_ATTEMPTS must be positive")

        if self.priority.never_studied_days < 0:
            raise ValueError("NEVER_STUDIED_DAYS cannot be negative")

        if self.monitoring.port < 0:
            raise ValueError("METRICS_PORT cannot be negative")


# Create global settings instance
settings = Settings()
settings.validate()
