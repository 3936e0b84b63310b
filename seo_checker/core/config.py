from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_env: str = "development"
    app_debug: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # CORS
    allowed_origins: str = "*"  # comma-separated, e.g. "https://app.example.com,https://admin.example.com"

    # Fetcher
    fetch_timeout: float = 10.0  # seconds, covers connect + read
    fetch_user_agent: str = "Mozilla/5.0 (compatible; SEOChecker/1.0)"

    # NLP
    nltk_auto_download: bool = True  # fetch missing nltk corpora on first use
    nltk_data_dir: str = ""  # extra nltk data path, empty = nltk defaults
    nltk_retry_interval: float = 300.0  # seconds before a failed resource check is retried

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs

    # Sentry
    sentry_dsn: str = ""  # leave empty to disable


settings = Settings()


def validate_settings_for_production() -> None:
    """Validate critical settings. Called on startup in non-test environments."""
    errors: list[str] = []

    if settings.fetch_timeout <= 0:
        errors.append("FETCH_TIMEOUT must be a positive number of seconds")
    if settings.nltk_retry_interval < 0:
        errors.append("NLTK_RETRY_INTERVAL must not be negative")

    if settings.app_env == "production":
        if settings.allowed_origins == "*":
            errors.append("ALLOWED_ORIGINS must not be '*' in production")
        if settings.app_debug:
            errors.append("APP_DEBUG must be false in production")

    if errors:
        raise SystemExit("Configuration errors:\n  - " + "\n  - ".join(errors))
