from ..models.observation import WeatherObservation

SYSTEM_PROMPT = "You are a helpful and friendly AI assistant that provides smart weather summaries."

INSTRUCTIONS = (
    "Generate:\n"
    "1. A short weather summary with emoji\n"
    "2. Clothing suggestion\n"
    "3. Health tip\n"
    "4. Outdoor advice\n"
    "Keep it under 100 words, user-friendly and positive."
)


def format_number(value: float) -> str:
    """12.0 -> "12", 12.5 -> "12.5", 1e300 -> "1e+300" """
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def build_weather_prompt(observation: WeatherObservation) -> str:
    """
    관측값 -> 사용자 메시지 프롬프트 조립 (순수 함수, 같은 입력이면 같은 문자열)
    """
    weather_lines = "\n".join([
        f"- City: {observation.city}",
        f"- Country: {observation.country}",
        f"- Temperature: {format_number(observation.temp)}°C",
        f"- Humidity: {format_number(observation.humidity)}%",
        f"- Condition: {observation.condition}",
        f"- Wind speed: {format_number(observation.wind_speed)} km/h",
        f"- Date: {observation.observed_at}",
    ])

    return f"{SYSTEM_PROMPT}\n\nWeather data:\n{weather_lines}\n\n{INSTRUCTIONS}"


def build_messages(observation: WeatherObservation) -> list[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_weather_prompt(observation)},
    ]
