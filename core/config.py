from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Access Policy API"
    ENV: str = "development"
    LOG_LEVEL: str = Field("INFO", description="Level for the access_policy logger")

    # -------------------------------------------------
    # CORS (UI origins allowed to fetch permission summaries)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Policy engine
    # -------------------------------------------------
    # Log a warning the first time a resource/dimension without
    # any policy entry is queried. Never changes the answer.
    POLICY_GAP_WARNINGS: bool = Field(True, description="Warn on configuration gaps (default: on)")

    # Distinct gaps remembered for first-occurrence warnings (oldest dropped)
    POLICY_GAP_LOG_MAX_ENTRIES: int = Field(512, description="Max remembered configuration gaps (default: 512)")

    # Upper bound for memoized answers held by the actor-bound query layer
    POLICY_CACHE_MAX_ENTRIES: int = Field(2048, description="Max cached permission answers (default: 2048)")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    model_config = SettingsConfigDict(case_sensitive=True)


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Normalize CORS list after loading settings
# -------------------------------------------------
settings.BACKEND_CORS_ORIGINS = sorted(
    {origin.rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS}
)
