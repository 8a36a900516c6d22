import random
from datetime import datetime

import requests

from ..utils.logger import log
from ..utils.openweather import WeatherLookupError, get_openweather_current

PROVIDERS = ("mock", "openweather")


class WeatherService:
    """
    도시 이름 -> 날씨 dict. 기본은 데모용 mock 데이터.
    """

    def __init__(self, provider: str = "mock", api_key: str | None = None,
                 rng: random.Random | None = None, clock=datetime.now, session=None):
        if provider not in PROVIDERS:
            raise ValueError(f"Unknown weather provider: {provider}")
        if provider == "openweather" and not api_key:
            raise ValueError("OPENWEATHER_API_KEY is required for the openweather provider")

        self.provider = provider
        self.api_key = api_key
        self.rng = rng or random.Random()
        self.clock = clock
        self.session = session or requests.Session()

    def get_weather(self, city: str) -> dict:
        if self.provider == "openweather":
            try:
                return get_openweather_current(city, self.api_key, session=self.session)
            except WeatherLookupError as e:
                if e.status != 404:
                    log("❌ OpenWeather 조회 실패", level="error", exc_info=e, city=city)
                raise
        return self.mock_weather(city)

    def mock_weather(self, city: str) -> dict:
        return {
            "city": city,
            "country": "DemoLand",
            "temp": self.rng.randint(15, 35),
            "humidity": self.rng.randint(40, 90),
            "condition": "clear sky",
            "windSpeed": self.rng.randint(5, 20),
            "datetime": self.clock().strftime("%Y-%m-%d %H:%M:%S"),
        }
