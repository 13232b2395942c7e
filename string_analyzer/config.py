import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

# ------------------------------------------------------------------------------
# PERSISTENCE
# ------------------------------------------------------------------------------

STRINGS_FILE = os.getenv("STRINGS_FILE", "strings.json")
PERSISTENCE_ENABLED = os.getenv("PERSISTENCE_ENABLED", "true").lower() in ("1", "true", "yes")

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))
