from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError


def _reject_bool(value):
    # JSON true/false는 숫자로 받지 않는다
    if isinstance(value, bool):
        raise PydanticCustomError("number_type", "Input should be a number")
    return value


Number = Annotated[float, BeforeValidator(_reject_bool)]
Text = Annotated[str, Field(min_length=1, max_length=255)]


class WeatherObservation(BaseModel):
    """
    AI 요약 요청 바디. 요청 하나 동안만 쓰고 버린다.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    city: Text
    country: Text
    temp: Number = Field(ge=-50, le=60)
    humidity: Number = Field(ge=0, le=100)
    condition: Text
    wind_speed: Number = Field(alias="windSpeed", ge=0)
    observed_at: str = Field(alias="datetime", min_length=1)


class CityQuery(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    city: Text
