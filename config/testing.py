from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Tests drive refreshes explicitly.
AUTO_REFRESH = False
