"""UI configuration constants.

Centralizes magic numbers and display text for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


APP_TITLE = "FloatChat"
APP_SUBTITLE = "AI-Powered ARGO Ocean Data Discovery"

QUICK_QUESTIONS = (
    "Show me temperature trends in the Indian Ocean",
    "What's the salinity profile at different depths?",
    "Analyze ocean currents near the Bay of Bengal",
    "Display seasonal temperature variations",
)

# Static status lines shown under the quick questions
DATA_SOURCES = (
    ("ARGO Floats", "Active"),
    ("Vector DB", "Online"),
    ("LLM Pipeline", "Ready"),
)

THINKING_TEXT = "FloatChat AI is thinking..."
INPUT_PLACEHOLDER = "Ask about ocean temperature, salinity, currents, or any marine data..."

USER_LABEL = "You"
BOT_LABEL = "FloatChat AI"

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
MESSAGE_TIMESTAMP_FORMAT = "%H:%M:%S"

# Chart image size in inches at CHART_DPI
CHART_SIZE = (6.0, 3.0)
CHART_DPI = 100
