"""
Configuration constants for the GenVault client.
"""

import os

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")  # Use: Accepted values for GENVAULT_LOG_LEVEL. Type: tuple[str]. Range: Standard logging level names.


def env_positive_float(name: str, default: float) -> float:
    """Read a positive float from the environment; fall back on bad or missing values."""
    try:
        value = float(os.environ.get(name, default))
    except ValueError:
        return default
    return value if value > 0 else default


def env_log_level(name: str, default: str) -> str:
    """Read a logging level name from the environment; fall back on unknown names."""
    value = os.environ.get(name, default).strip().upper()
    return value if value in LOG_LEVEL_NAMES else default

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the client. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "GenVault"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_TITLE_PREFIX = f"{APP_NAME} v{APP_VERSION}"  # Use: Prefix for window titles, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').

# Remote Vault API
API_BASE_URL = os.environ.get("GENVAULT_API_URL", "https://genvault-backend.vercel.app").rstrip("/")  # Use: Base URL of the remote vault service. Type: str. Range: http(s) URL without trailing slash. Env: GENVAULT_API_URL.
REQUEST_TIMEOUT_SECONDS = env_positive_float("GENVAULT_REQUEST_TIMEOUT", 10.0)  # Use: Timeout for every HTTP request. Type: float. Range: Positive seconds; bad values fall back to 10. Env: GENVAULT_REQUEST_TIMEOUT.
USER_AGENT = f"GenVault/{APP_VERSION}"  # Use: User-Agent header sent with every request. Type: str. Range: Any string.
ENTRIES_PATH = "/api/entries/{user_id}"  # Use: Path template for fetching a user's entries. Type: str. Range: Path with a {user_id} placeholder.
SAVE_PATH = "/api/save/{user_id}"  # Use: Path template for saving a new entry. Type: str. Range: Path with a {user_id} placeholder.
GENERATE_PATH = "/api/generate"  # Use: Path of the password generator endpoint. Type: str. Range: Any path.

# Password Generator Settings
GENERATOR_DEFAULT_LETTERS = 8  # Use: Default count of letters requested from the generator. Type: int. Range: Passed through to the service unvalidated.
GENERATOR_DEFAULT_NUMBERS = 4  # Use: Default count of digits requested from the generator. Type: int. Range: Passed through to the service unvalidated.
GENERATOR_DEFAULT_SYMBOLS = 2  # Use: Default count of symbols requested from the generator. Type: int. Range: Passed through to the service unvalidated.
GENERATOR_SPIN_MIN = -999  # Use: Lower bound of the option spin boxes; the service decides what is valid. Type: int. Range: Any int below GENERATOR_SPIN_MAX.
GENERATOR_SPIN_MAX = 999  # Use: Upper bound of the option spin boxes. Type: int. Range: Any int above GENERATOR_SPIN_MIN.

# Status Messages
STATUS_SAVE_SUCCESS = "Data saved successfully!"  # Use: Status message after a successful save. Type: str. Range: Any string.
STATUS_SAVE_FAILURE = "Error saving data!"  # Use: Status message after a failed save. Type: str. Range: Any string.
STATUS_REFRESH_FAILURE = "Could not load entries"  # Use: Transient status-bar text after a failed fetch. Type: str. Range: Any string.
STATUS_GENERATE_FAILURE = "Could not generate password"  # Use: Transient status-bar text after a failed generate. Type: str. Range: Any string.
STATUS_BAR_TIMEOUT_MS = 4000  # Use: How long transient status-bar messages stay visible. Type: int. Range: Milliseconds, positive.

# UI Settings
TABLE_PASSWORD_HIDDEN_TEXT = "••••••••"  # Use: Placeholder text displayed in the table for hidden passwords. Type: str. Range: Any string.
CLIPBOARD_CLEAR_TIMEOUT_SECONDS = 30  # Use: Seconds after which a copied password is cleared from the clipboard. Type: int. Range: Positive integer.
CLIPBOARD_CLEAR_TIMEOUT = CLIPBOARD_CLEAR_TIMEOUT_SECONDS * 1000  # Use: Clipboard clear timeout in milliseconds. Type: int. Range: Derived value.
USER_ID_PROMPT = "Enter your GenVault user ID:"  # Use: Prompt shown when no user ID is given on the command line. Type: str. Range: Any string.

# Logging
LOG_LEVEL = env_log_level("GENVAULT_LOG_LEVEL", "INFO")  # Use: Root log level. Type: str. Range: LOG_LEVEL_NAMES; unknown names fall back to INFO. Env: GENVAULT_LOG_LEVEL.
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'  # Use: Format string for log records. Type: str. Range: Valid logging format string.
