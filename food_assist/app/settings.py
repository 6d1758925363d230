from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Keys must be provided via env / .env (never hardcode secrets in code)
    openai_api_key: str | None = None
    youtube_api_key: str | None = None  # YOUTUBE_API_KEY
    langsmith_api_key: str | None = None
    langsmith_project: str | None = None
    langchain_tracing_v2: bool = False
    model_name: str = "gpt-4o-mini"
    temperature: float = 0.2

    youtube_search_url: str = "https://www.googleapis.com/youtube/v3/search"
    request_timeout: float = 30.0

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()  # load once at import
