import os

from .config import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

AUTO_REFRESH = bool(int(os.getenv("AUTO_REFRESH", "1")))
