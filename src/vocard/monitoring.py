"""Monitoring configuration for the trainer."""
from prometheus_client import Counter, start_http_server

# Study metrics
study_sessions = Counter(
    "vocard_study_sessions_total",
    "Total number of study and quiz sessions started",
)

answers_recorded = Counter(
    "vocard_answers_recorded_total",
    "Total number of flashcard and quiz answers recorded",
    ["mode", "result"],
)

# Quiz metrics
quizzes_generated = Counter(
    "vocard_quizzes_generated_total",
    "Total number of quizzes generated",
    ["question_type"],
)

quiz_generation_failures = Counter(
    "vocard_quiz_generation_failures_total",
    "Total number of quiz requests rejected for lack of words",
)

# Storage metrics
storage_errors = Counter(
    "vocard_storage_errors_total",
    "Total number of storage errors encountered",
    ["operation"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
