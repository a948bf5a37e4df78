"""Project-wide configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(os.environ.get("IMAGE_DIALOG_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

# Content API
API_BASE_URL = os.environ.get("IMAGE_DIALOG_API_BASE_URL", "")
API_TOKEN = os.environ.get("IMAGE_DIALOG_API_TOKEN", "")
API_USER_NAME = os.environ.get("IMAGE_DIALOG_USER_NAME", "")
API_TIMEOUT = float(os.environ.get("IMAGE_DIALOG_API_TIMEOUT", "30"))

# Image sources
PICTO_CONTENT_TYPE_ID = 19
GHT1T_CONTENT_TYPE_ID = 20
DEFAULT_CONTENT_TYPE_IDS: list[int] = [PICTO_CONTENT_TYPE_ID, GHT1T_CONTENT_TYPE_ID]

# Cross-component signals
IMAGE_REMOVED_EVENT = "image:removed"
