from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Taskboard API"
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # DB
    DATABASE_URL: str = "sqlite:///./taskboard.db"
    DATABASE_ECHO: bool = False

    # Client / UI
    API_URL: str = "http://localhost:8000/api/v1"
    API_TIMEOUT: float = 10.0
    UI_LOCALE: str = "ja"  # or "en"
    UI_TIMEZONE: str = "Asia/Tokyo"  # used when the browser does not report one

settings = Settings()
