import os
from dotenv import load_dotenv

load_dotenv()

# Google service account and target spreadsheet - loaded from .env
GOOGLE_SERVICE_ACCOUNT_EMAIL = os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL", "")
GOOGLE_PRIVATE_KEY = os.getenv("GOOGLE_PRIVATE_KEY", "").replace("\\n", "\n")
GOOGLE_SPREADSHEET_ID = os.getenv("GOOGLE_SPREADSHEET_ID", "")
GOOGLE_DRIVE_FOLDER_ID = os.getenv("GOOGLE_DRIVE_FOLDER_ID", "")

# Sheet (tab) names
CREATIVE_SHEET_NAME = os.getenv("GOOGLE_SHEET_NAME", "Creative")
TITLE_SHEET_NAME = os.getenv("GOOGLE_TITLE_SHEET_NAME", "Title")

# Column layout revision (see creative_naming.schemas)
SCHEMA_REVISION = os.getenv("SCHEMA_REVISION", "marketing")

# OpenRouter (OpenAI-compatible API)
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "anthropic/claude-3-haiku")
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
VISION_TIMEOUT_S = float(os.getenv("VISION_TIMEOUT_S", "30"))

# Upload limits
MAX_FILES = 20
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB


def validate_config() -> list[str]:
    """Return a list of missing required settings (empty when valid)."""
    errors = []
    if not GOOGLE_SERVICE_ACCOUNT_EMAIL:
        errors.append("GOOGLE_SERVICE_ACCOUNT_EMAIL is required")
    if not GOOGLE_PRIVATE_KEY:
        errors.append("GOOGLE_PRIVATE_KEY is required")
    if not GOOGLE_SPREADSHEET_ID:
        errors.append("GOOGLE_SPREADSHEET_ID is required")
    if not OPENROUTER_API_KEY:
        errors.append("OPENROUTER_API_KEY is required")
    return errors
