import pytest

from weatherdash.models.observation import WeatherObservation
from weatherdash.models.result import Err, Ok
from weatherdash.models.validation import validate_payload

FIELDS = ["city", "country", "temp", "humidity", "condition", "windSpeed", "datetime"]


def test_valid_observation(paris):
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Ok)
    observation = result.value
    assert observation.city == "Paris"
    assert observation.wind_speed == 12
    assert observation.observed_at == "2024-01-01 10:00:00"
    assert observation.model_dump(by_alias=True)["windSpeed"] == 12


@pytest.mark.parametrize("field", FIELDS)
def test_missing_field_is_required(paris, field):
    del paris[field]
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Err)
    assert result.status == 422
    assert result.error.errors == {field: [f"The {field} field is required."]}


@pytest.mark.parametrize("field", ["city", "country", "condition", "datetime"])
def test_blank_string_is_required(paris, field):
    paris[field] = "   "
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Err)
    assert result.error.errors[field] == [f"The {field} field is required."]


@pytest.mark.parametrize("field, value, message", [
    ("temp", -51, "The temp field must be between -50 and 60."),
    ("temp", 60.5, "The temp field must be between -50 and 60."),
    ("humidity", -1, "The humidity field must be between 0 and 100."),
    ("humidity", 101, "The humidity field must be between 0 and 100."),
    ("windSpeed", -0.1, "The windSpeed field must be at least 0."),
])
def test_out_of_range(paris, field, value, message):
    paris[field] = value
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Err)
    assert result.error.errors == {field: [message]}


@pytest.mark.parametrize("field, value", [
    ("temp", -50), ("temp", 60), ("humidity", 0), ("humidity", 100), ("windSpeed", 0),
])
def test_range_bounds_are_inclusive(paris, field, value):
    paris[field] = value

    assert isinstance(validate_payload(WeatherObservation, paris), Ok)


def test_numeric_strings_are_accepted(paris):
    paris["temp"] = "12"
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Ok)
    assert result.value.temp == 12


@pytest.mark.parametrize("value", [True, "warm", None, float("nan")])
def test_non_numbers_are_rejected(paris, value):
    paris["temp"] = value
    result = validate_payload(WeatherObservation, paris)

    assert isinstance(result, Err)
    assert "temp" in result.error.errors


def test_city_must_be_string(paris):
    paris["city"] = 42
    result = validate_payload(WeatherObservation, paris)

    assert result.error.errors == {"city": ["The city field must be a string."]}


def test_city_max_length(paris):
    paris["city"] = "x" * 256
    result = validate_payload(WeatherObservation, paris)

    assert result.error.errors == {"city": ["The city field must not be greater than 255 characters."]}


def test_several_errors_are_reported_together(paris):
    del paris["city"]
    paris["humidity"] = 150
    result = validate_payload(WeatherObservation, paris)

    assert set(result.error.errors) == {"city", "humidity"}
    assert result.error.to_body()["message"] == "The given data was invalid."


@pytest.mark.parametrize("payload", [None, [], "Paris", 12])
def test_non_object_body(payload):
    result = validate_payload(WeatherObservation, payload)

    assert isinstance(result, Err)
    assert "body" in result.error.errors


def test_lower_bound_message_uses_whole_number(paris):
    paris["windSpeed"] = -3
    result = validate_payload(WeatherObservation, paris)

    assert result.error.errors["windSpeed"] == ["The windSpeed field must be at least 0."]
    assert "0.0" not in result.error.errors["windSpeed"][0]
