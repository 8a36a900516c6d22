from flask import Blueprint, current_app, jsonify, request

from ..models.observation import CityQuery
from ..models.result import Err
from ..models.validation import validate_payload
from ..utils.auth import token_required
from ..utils.openweather import WeatherLookupError

weather_bp = Blueprint("weather", __name__)


@weather_bp.route("/weather", methods=["POST"])
@token_required
def weather():
    data = request.get_json(silent=True)
    if data is None:
        data = {}

    checked = validate_payload(CityQuery, data)
    if isinstance(checked, Err):
        return jsonify(checked.error.to_body()), checked.status

    try:
        weather_data = current_app.extensions["weather_service"].get_weather(checked.value.city)
    except WeatherLookupError as e:
        message = "City not found." if e.status == 404 else "Weather service unavailable."
        return jsonify({"message": message}), e.status

    return jsonify(weather_data)
