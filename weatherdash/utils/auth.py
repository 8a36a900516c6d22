from functools import wraps

from flask import current_app, g, jsonify, request

from ..services.auth_service import AuthError


def bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def token_required(view):
    """
    Authorization: Bearer <token> 확인 후 g.user / g.token 세팅
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        token = bearer_token()
        if token is None:
            return jsonify({"message": "Unauthenticated."}), 401

        try:
            g.user = current_app.extensions["auth_service"].resolve(token)
        except AuthError as e:
            return jsonify({"message": e.message}), e.status

        g.token = token
        return view(*args, **kwargs)

    return wrapper
