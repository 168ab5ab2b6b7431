# cancer_app/__init__.py
from flask import Flask
from flask_cors import CORS
from .core.config import Config
from .core.logging_setup import configure_logging
from .api.predict_routes import predict_bp
from .ml.classification.engine import ClassificationEngine
from .services.history_service import PredictionStore
from .services.prediction_service import PredictionService


def create_app(config_object=Config, engine=None, store=None):
    """
    App factory.
    engine / store bisa di-inject (dipakai di test); kalau None dibuat dari config.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Izinkan akses dari semua origin (frontend beda domain)
    CORS(app)

    if store is None:
        store = PredictionStore()
        if app.config.get("DB_AUTO_CREATE"):
            store.create_tables()

    autoload = engine is None and app.config.get("MODEL_AUTOLOAD", True)
    if engine is None:
        engine = ClassificationEngine()

    app.extensions["prediction_service"] = PredictionService(engine, store)

    # Register blueprint prediksi
    app.register_blueprint(predict_bp, url_prefix=app.config.get("API_PREFIX") or None)

    # Load model di background, request sebelum siap dapat 503
    if autoload:
        engine.load_in_background(app.config["MODEL_SOURCE"])

    return app
