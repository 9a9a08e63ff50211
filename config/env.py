"""Environment bootstrap module.

Importing this module loads variables from a .env file (AI_API_KEY,
AI_BASE_URL, AI_MODEL_ID, ...) so that lower layers only call os.getenv.
"""

from dotenv import load_dotenv as _load_dotenv

# Existing environment variables take precedence over .env
_load_dotenv(override=False)
