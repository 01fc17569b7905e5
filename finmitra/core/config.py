"""
Application configuration loader and it handles:
- Environment variables
- App settings
- Model configuration
- Trace database configuration

And, the main purpose:
Central place for system configuration.
"""


from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "FinMitra"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite+aiosqlite:///./finmitra.db"

    # LLM
    LLM_PROVIDER: str = "groq"  # groq | mock (for no-key dev)
    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    LLM_MODEL: str = "llama-3.3-70b-versatile"
    LLM_TEMPERATURE: float = 0.4
    LLM_TIMEOUT_SECONDS: float = 40.0
    LLM_MAX_ATTEMPTS: int = 3
    LLM_BACKOFF_SECONDS: float = 0.6

    # Flow traces
    TRACE_FLOWS: bool = True
    TRACE_RETENTION_DAYS: int = 30

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
