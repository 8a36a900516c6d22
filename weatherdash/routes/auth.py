from datetime import datetime

from flask import Blueprint, current_app, g, jsonify, request

from ..models.auth import LoginRequest, RegisterRequest
from ..models.result import Err, ValidationError
from ..models.validation import validate_payload
from ..services.auth_service import AuthError
from ..utils.auth import token_required
from ..utils.logger import log

auth_bp = Blueprint("auth", __name__)


def _auth_service():
    return current_app.extensions["auth_service"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if data is not None else {}


def _token_response(message: str, user, status: int = 200):
    token = _auth_service().issue_token(user)
    return jsonify({
        "message": message,
        "user": user.to_resource(),
        "access_token": token,
        "token_type": "Bearer",
    }), status


@auth_bp.route("/register", methods=["POST"])
def register():
    checked = validate_payload(RegisterRequest, _json_body())
    if isinstance(checked, Err):
        return jsonify(checked.error.to_body()), checked.status

    form: RegisterRequest = checked.value
    try:
        user = _auth_service().register(form.name, form.email, form.password)
    except AuthError as e:
        error = ValidationError({"email": [e.message]})
        return jsonify(error.to_body()), error.status

    log(f"👤 회원가입 완료: {user.email}")
    return _token_response("User registered successfully", user, 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    checked = validate_payload(LoginRequest, _json_body())
    if isinstance(checked, Err):
        return jsonify(checked.error.to_body()), checked.status

    form: LoginRequest = checked.value
    log("Login request received", email=form.email)

    try:
        user = _auth_service().authenticate(form.email, form.password)
    except AuthError as e:
        log(f"Login failed: {e.error_type}", level="warning", email=form.email)
        return jsonify({"message": e.message, "error_type": e.error_type}), e.status

    return _token_response("Login successful", user)


@auth_bp.route("/logout", methods=["POST"])
@token_required
def logout():
    _auth_service().revoke(g.token)
    return jsonify({"message": "Logout successful"})


@auth_bp.route("/user", methods=["GET"])
@token_required
def current_user():
    return jsonify(g.user.to_resource())


@auth_bp.route("/dashboard", methods=["GET"])
@token_required
def dashboard():
    user = g.user.to_resource()
    return jsonify({
        "message": "Welcome to your dashboard!",
        "user": {key: user[key] for key in ("id", "name", "email")},
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    })
