# cancer_app/api/predict_routes.py
import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from cancer_app.core.errors import InvalidFileTypeError, PersistenceError, PredictionAppError

logger = logging.getLogger(__name__)

predict_bp = Blueprint("predict", __name__)


def _service():
    return current_app.extensions["prediction_service"]


def _fail(message: str, status_code: int):
    return jsonify({"status": "fail", "message": message}), status_code


def _read_upload():
    """
    Ambil bytes dari field "image" (multipart/form-data).
    return None kalau field tidak ada, biar service yang putuskan (MissingInputError).
    """
    file = request.files.get("image")
    if file is None:
        return None

    mimetype = (file.mimetype or "").lower()
    if not mimetype.startswith("image/"):
        raise InvalidFileTypeError()

    max_size = current_app.config["MAX_FILE_SIZE"]
    data = file.read(max_size + 1)
    if len(data) > max_size:
        raise RequestEntityTooLarge()
    return data


@predict_bp.route("/predict", methods=["POST"])
def predict():
    """
    Endpoint utama:
    - menerima file "image" (multipart/form-data)
    - klasifikasi Cancer / Non-cancer, simpan ke DB
    - 201 + record hasil prediksi
    """
    image_bytes = _read_upload()
    record = _service().handle_predict(image_bytes)

    return jsonify({
        "status": "success",
        "message": "Model is predicted successfully",
        "data": record.to_dict(),
    }), 201


@predict_bp.route("/predict/histories", methods=["GET"])
def histories():
    try:
        data = _service().handle_history()
    except PersistenceError as e:
        raise PersistenceError("Error fetching prediction histories") from e

    return jsonify({"status": "success", "data": data}), 200


@predict_bp.errorhandler(PredictionAppError)
def handle_app_error(e: PredictionAppError):
    if e.status_code >= 500:
        logger.warning("%s: %s", type(e).__name__, e.message)
    return _fail(e.message, e.status_code)


@predict_bp.app_errorhandler(RequestEntityTooLarge)
def handle_too_large(e):
    max_size = current_app.config.get("MAX_FILE_SIZE")
    return _fail(f"Payload content length greater than maximum allowed: {max_size}", 413)
