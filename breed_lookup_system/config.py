from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # App Settings
    app_name: str = "Dog Breed Lookup"
    app_version: str = "1.0.0"
    debug: bool = False

    # Dog API Settings
    dog_api_base_url: str = "https://dog.ceo/api"
    request_timeout: float = 10.0  # seconds

    # Logging Settings
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()
