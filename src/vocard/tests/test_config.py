"""Tests for configuration settings."""
import pytest

from vocard.config import DEFAULT_VOCABULARY_FILE, Settings, settings


def test_settings_defaults():
    """Test default settings values."""
    assert settings.storage.progress_key == "vocard_user_progress"
    assert settings.quiz.default_question_count == 10
    assert settings.quiz.min_words == 4
    assert settings.quiz.distractor_count == 3
    assert settings.mastery.mastery_rate == 0.8
    assert settings.mastery.min_attempts == 3
    assert settings.priority.new_word_priority == 50
    assert settings.priority.never_studied_days == 30
    assert settings.catalog.vocabulary_file == DEFAULT_VOCABULARY_FILE
    assert DEFAULT_VOCABULARY_FILE.exists()


def test_settings_from_env(monkeypatch):
    """Test that settings can be overridden by environment variables."""
    monkeypatch.setenv("DEFAULT_QUESTION_COUNT", "15")
    monkeypatch.setenv("PROGRESS_STORAGE_KEY", "other_key")

    test_settings = Settings()

    assert test_settings.quiz.default_question_count == 15
    assert test_settings.storage.progress_key == "other_key"


@pytest.mark.parametrize(
    "name, value",
    [
        ("MASTERY_RATE", "1.5"),
        ("MASTERY_MIN_ATTEMPTS", "0"),
        ("DEFAULT_QUESTION_COUNT", "0"),
        ("NEVER_STUDIED_DAYS", "-1"),
        ("METRICS_PORT", "-80"),
    ],
)
def test_validate_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings().validate()
