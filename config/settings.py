from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Calculator defaults. Override with DDM_* environment variables or a .env file."""

    # Input defaults (percentages as shown in the UI)
    default_d0: float = 5.0
    default_required_pct: float = 10.0
    default_g_const_pct: float = 5.0
    default_g_short_pct: float = 5.0
    default_g_long_pct: float = 3.0
    default_short_years: int = 5
    max_short_years: int = 20

    # "all" | "constant" | "growth" | "changing"
    default_model: str = "constant"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DDM_", env_file=".env", extra="ignore")


settings = Settings()
