import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

AI_BASE_URL = os.getenv("AI_BASE_URL", "http://localhost:11434/v1")
AI_MODEL = os.getenv("AI_MODEL", "tinyllama")
AI_API_KEY = os.getenv("AI_API_KEY")

# 고정값 (환경변수로 바꾸지 않음)
AI_TIMEOUT_SECONDS = 30
AI_MAX_TOKENS = 200
AI_TEMPERATURE = 0.7

TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "86400"))
TOKEN_CLEANUP_MINUTES = int(os.getenv("TOKEN_CLEANUP_MINUTES", "60"))

WEATHER_PROVIDER = os.getenv("WEATHER_PROVIDER", "mock")
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class AIServiceConfig:
    base_url: str = AI_BASE_URL
    model: str = AI_MODEL
    api_key: str | None = AI_API_KEY
    timeout: float = AI_TIMEOUT_SECONDS
    max_tokens: int = AI_MAX_TOKENS
    temperature: float = AI_TEMPERATURE

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


@dataclass(frozen=True)
class Settings:
    """
    앱 전체 설정. 시작 시 한 번만 읽고 create_app()에 넘긴다.
    """
    ai: AIServiceConfig = field(default_factory=AIServiceConfig)
    token_ttl_seconds: int = TOKEN_TTL_SECONDS
    token_cleanup_minutes: int = TOKEN_CLEANUP_MINUTES
    weather_provider: str = WEATHER_PROVIDER
    openweather_api_key: str | None = OPENWEATHER_API_KEY
    start_scheduler: bool = True
    testing: bool = False
