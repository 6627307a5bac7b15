from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # LLM (OpenAI)
    OPENAI_API_KEY: Optional[str] = None  # Checked per request, not at startup
    LLM_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 2500

    # Rate limiting
    DAILY_LIMIT: int = 3

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

def get_settings() -> Settings:
    """
    Dependency returning settings freshly read from the environment,
    so a credential added or rotated after startup is picked up.
    """
    return Settings()
