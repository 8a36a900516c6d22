from flask import Blueprint, current_app, jsonify, request

from ..models.result import Err
from ..utils.auth import token_required

ai_bp = Blueprint("ai", __name__)


@ai_bp.route("/ai-summary", methods=["POST"])
@ai_bp.route("/api/ai-summary", methods=["POST"])
@token_required
def ai_summary():
    data = request.get_json(silent=True)
    if data is None:
        data = {}

    result = current_app.extensions["summary_gateway"].summarize(data)

    if isinstance(result, Err):
        return jsonify(result.error.to_body()), result.status
    return jsonify({"summary": result.value}), result.status
