# utils/openweather.py

from datetime import datetime

import requests

from ..config import OPENWEATHER_URL


class WeatherLookupError(Exception):
    def __init__(self, message: str, status: int = 502):
        super().__init__(message)
        self.message = message
        self.status = status


def get_openweather_current(city: str, api_key: str, session=requests) -> dict:
    """
    OpenWeatherMap 현재 날씨 -> /ai-summary 입력과 같은 모양의 dict

    반환 예시:
    {
        "city": "Paris",
        "country": "FR",
        "temp": 12.3,
        "humidity": 64,
        "condition": "Clouds",
        "windSpeed": 4.1,
        "datetime": "2024-01-01 10:00:00"
    }
    """
    params = {"q": city, "appid": api_key, "units": "metric"}

    try:
        res = session.get(OPENWEATHER_URL, params=params, timeout=10)
    except requests.RequestException as e:
        raise WeatherLookupError(f"OpenWeather request failed: {e}") from e

    if res.status_code == 404:
        raise WeatherLookupError("City not found.", status=404)
    if not res.ok:
        raise WeatherLookupError(f"OpenWeather request failed: {res.status_code}")

    try:
        data = res.json()
        observed = datetime.fromtimestamp(data["dt"]) if "dt" in data else datetime.now()
        return {
            "city": data.get("name") or city,
            "country": data.get("sys", {}).get("country", ""),
            "temp": data["main"]["temp"],
            "humidity": data["main"]["humidity"],
            "condition": data["weather"][0]["main"],
            "windSpeed": data.get("wind", {}).get("speed", 0),
            "datetime": observed.strftime("%Y-%m-%d %H:%M:%S"),
        }
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise WeatherLookupError(f"Unexpected OpenWeather response: {e}") from e
