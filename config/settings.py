from dotenv import load_dotenv
import os

"""
Deployment settings read from the environment (or a .env file in the working directory).
"""

load_dotenv()


def _csv_env(name: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


API_KEY = os.getenv("API_KEY")
ENABLE_CORS = os.getenv("ENABLE_CORS") == "true"
CORS_ALLOW_ORIGINS = _csv_env("CORS_ALLOW_ORIGINS")
ALLOWED_HOSTS = _csv_env("ALLOWED_HOSTS") or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit
