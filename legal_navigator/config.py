"""Legal Navigator — Application configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class NavigatorSettings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # ── Forum routing ──────────────────────────────────────────
    # Ontario Small Claims Court monetary limit (raised to $50,000 in 2025)
    small_claims_limit: float = 50_000
    default_jurisdiction: str = "Ontario"

    # ── CanLII ─────────────────────────────────────────────────
    canlii_api_key: str = ""
    canlii_base_url: str = "https://api.canlii.org/v1"

    # ── Evidence ───────────────────────────────────────────────
    timeline_gap_days: int = 7

    # ── Logging ────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "console"


settings = NavigatorSettings()
