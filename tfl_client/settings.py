from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.tfl.gov.uk"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TFL_",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL  # Override for testing against a stub server
    app_id: str = ""  # TfL unified API application id (register at api-portal.tfl.gov.uk)
    app_key: str = ""  # TfL unified API application key
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
