# chronicle_e2e/config/config.py

import os

from dotenv import load_dotenv

# Pick up a local .env before any value below is read
load_dotenv()


def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# --- General Configuration ---
# The Chronicle deployment under test
BASE_URL = os.getenv("BASE_URL", "https://staging.chronicle.rip").rstrip("/")

# Browser type to use for testing (chrome, chromium, firefox)
BROWSER = os.getenv("BROWSER", "chromium").lower()

HEADLESS = _get_bool("HEADLESS")

# Overall action timeout in milliseconds (kept in ms for parity with the .env files)
TIMEOUT = int(os.getenv("TIMEOUT", "30000"))

# Pause after each page-object action, in milliseconds (0 disables)
SLOW_MO = int(os.getenv("SLOW_MO", "0"))

# Implicit wait time (seconds). Explicit waits are used everywhere, keep this low.
IMPLICIT_WAIT = int(os.getenv("IMPLICIT_WAIT", "0"))

# Default explicit wait timeout (seconds)
DEFAULT_WAIT_TIMEOUT = TIMEOUT / 1000

# Window size for every scenario
WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080

# Where failure screenshots end up
SCREENSHOT_DIR = os.getenv("SCREENSHOT_DIR", os.path.join(os.getcwd(), "screenshots"))

# Live scenarios only run when explicitly requested
RUN_E2E = _get_bool("RUN_E2E")


# --- Specific Wait Times (seconds) ---
# The staging app is slow on first load and after saves
WAIT_FOR_LOGIN_REDIRECT = 45
WAIT_FOR_ELEMENT = 10
WAIT_FOR_PAGE_LOAD = 30
WAIT_FOR_NETWORK_IDLE = 15
WAIT_FOR_API = 30
WAIT_FOR_SAVE_REDIRECT = 30

# --- Retry defaults ---
DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY = 1
DEFAULT_POLL_INTERVAL = 0.5
