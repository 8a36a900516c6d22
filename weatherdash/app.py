from flask import Flask, jsonify

from .config import Settings
from .routes.ai import ai_bp
from .routes.auth import auth_bp
from .routes.weather import weather_bp
from .services.auth_service import AuthService
from .services.summary_gateway import SummaryGateway
from .services.weather_service import WeatherService
from .utils.logger import log
from .utils.scheduler import start_scheduler


def create_app(settings: Settings | None = None, summary_gateway: SummaryGateway | None = None,
               weather_service: WeatherService | None = None) -> Flask:
    settings = settings or Settings()

    app = Flask(__name__)
    app.config["TESTING"] = settings.testing
    app.json.ensure_ascii = False

    auth_service = AuthService(token_ttl_seconds=settings.token_ttl_seconds)
    app.extensions["settings"] = settings
    app.extensions["auth_service"] = auth_service
    app.extensions["summary_gateway"] = summary_gateway or SummaryGateway(settings.ai)
    app.extensions["weather_service"] = weather_service or WeatherService(
        provider=settings.weather_provider,
        api_key=settings.openweather_api_key,
    )

    app.register_blueprint(auth_bp)
    app.register_blueprint(weather_bp)
    app.register_blueprint(ai_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"message": "Not Found."}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"message": "Method Not Allowed."}), 405

    @app.route("/")
    def home():
        return jsonify({"status": "ok", "model": settings.ai.model})

    if settings.start_scheduler:
        app.extensions["scheduler"] = start_scheduler(auth_service, settings.token_cleanup_minutes)  # ✅ 여기에서 한 번만 실행

    log(f"✅ weatherdash 시작 (AI: {settings.ai.completions_url}, model={settings.ai.model})")
    return app


if __name__ == "__main__":
    create_app().run()
