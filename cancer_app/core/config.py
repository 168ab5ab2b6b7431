# cancer_app/core/config.py
import os
from dotenv import load_dotenv

# Load .env sekali di awal aplikasi
load_dotenv()

def _env_bool(name: str, default: str = "0") -> bool:
    v = str(os.environ.get(name, default)).strip().lower()
    return v in ("1", "true", "yes", "y", "on")

class Config:
    # =========================
    # APP / SECURITY
    # =========================
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    PORT = int(os.environ.get("PORT", 3000))

    # prefix route, default kosong -> /predict dan /predict/histories
    API_PREFIX = os.environ.get("API_PREFIX", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # BASE_DIR = root project (folder di atas cancer_app)
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

    # =========================
    # UPLOAD
    # =========================
    # batas ukuran FILE gambar (dicek di route)
    MAX_FILE_SIZE = int(os.environ.get("MAX_FILE_SIZE", 1000000))  # 1MB

    # batas body request di Flask/Werkzeug (413): file + overhead multipart (boundary, header part)
    MULTIPART_OVERHEAD = int(os.environ.get("MULTIPART_OVERHEAD", 64 * 1024))
    MAX_CONTENT_LENGTH = MAX_FILE_SIZE + MULTIPART_OVERHEAD

    # =========================
    # CLASSIFICATION MODEL
    # =========================
    CLSF_MODEL_DIR = os.path.join(BASE_DIR, "models", "classification")

    # path lokal (.keras / .h5) atau URL http(s)
    MODEL_SOURCE = os.environ.get(
        "MODEL_SOURCE",
        os.path.join(CLSF_MODEL_DIR, "cancer_classification_model.keras"),
    )

    # tempat cache artefak model yang di-download dari URL
    MODEL_CACHE_DIR = os.environ.get("MODEL_CACHE_DIR", os.path.join(BASE_DIR, "model_cache"))

    # load model di background thread saat app start
    MODEL_AUTOLOAD = _env_bool("MODEL_AUTOLOAD", "1")

    # ukuran input model (fixed)
    IMG_HEIGHT = 224
    IMG_WIDTH = 224

    # =========================
    # DATABASE (default MySQL)
    # =========================
    DATABASE_URL = os.environ.get("DATABASE_URL", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = os.environ.get("DB_PORT", "3306")  # default MySQL
    DB_NAME = os.environ.get("DB_NAME", "cancer_prediction_db")
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")

    # buat tabel otomatis saat create_app()
    DB_AUTO_CREATE = _env_bool("DB_AUTO_CREATE", "0")

    @classmethod
    def database_url(cls) -> str:
        """
        SQLAlchemy connection string.
        DATABASE_URL (kalau diisi) menang atas setting DB_* MySQL.
        """
        if cls.DATABASE_URL:
            return cls.DATABASE_URL
        return (
            f"mysql+pymysql://{cls.DB_USER}:{cls.DB_PASSWORD}"
            f"@{cls.DB_HOST}:{cls.DB_PORT}/{cls.DB_NAME}"
        )
