"""
Configuration and constants for FitPlan Microservice.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # OpenRouter Configuration (OpenAI-compatible API)
    OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "")
    OPENROUTER_BASE_URL: str = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "google/gemini-2.0-flash-exp:free")

    # Sent as HTTP-Referer / X-Title so OpenRouter can attribute traffic
    SITE_URL: str = os.getenv("SITE_URL", "")
    SITE_NAME: str = os.getenv("SITE_NAME", "FitPlan")

    # Server Configuration
    PORT: int = int(os.getenv("PORT", 10000))
    HOST: str = "0.0.0.0"

    # Upstream retry policy
    PLAN_MAX_RETRIES: int = int(os.getenv("PLAN_MAX_RETRIES", 2))
    PLAN_INITIAL_DELAY_MS: int = int(os.getenv("PLAN_INITIAL_DELAY_MS", 1000))
    PLAN_BACKOFF_MULTIPLIER: float = float(os.getenv("PLAN_BACKOFF_MULTIPLIER", 2.0))
    QUOTE_MAX_RETRIES: int = int(os.getenv("QUOTE_MAX_RETRIES", 2))

    # Per-call timeouts in seconds
    UPSTREAM_TIMEOUT: float = 90.0
    UPSTREAM_CONNECT_TIMEOUT: float = 10.0

    # Plan cache: unset keeps plans in memory only
    PLAN_CACHE_DIR: str = os.getenv("PLAN_CACHE_DIR", "")

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration on startup."""
        missing = []

        if not cls.OPENROUTER_API_KEY:
            missing.append("OPENROUTER_API_KEY")

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )


settings = Settings()
