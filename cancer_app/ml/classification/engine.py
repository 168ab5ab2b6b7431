# cancer_app/ml/classification/engine.py
import enum
import logging
import threading

from cancer_app.core.errors import ModelNotReadyError
from .predict import predict_score

logger = logging.getLogger(__name__)


class ModelState(str, enum.Enum):
    UNLOADED = "Unloaded"
    LOADING = "Loading"
    READY = "Ready"
    LOAD_FAILED = "LoadFailed"


def _default_loader(source):
    # import di sini supaya tensorflow baru di-load saat model benar-benar dibutuhkan
    from .model_loader import load_classification_model
    return load_classification_model(source)


class ClassificationEngine:
    """
    Pembungkus model klasifikasi (1 instance per proses, di-inject ke PredictionService).

    State: Unloaded -> Loading -> Ready / LoadFailed.
    LoadFailed boleh di-retry dengan memanggil load() lagi.
    Perubahan state hanya lewat load() (dijaga lock), predict() cuma membaca.
    """

    def __init__(self, loader=None):
        self._loader = loader or _default_loader
        self._lock = threading.Lock()
        self._state = ModelState.UNLOADED
        self._model = None

    @property
    def status(self) -> ModelState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ModelState.READY

    def load(self, source) -> ModelState:
        with self._lock:
            # sudah Ready atau sedang di-load thread lain -> no-op
            if self._state in (ModelState.READY, ModelState.LOADING):
                return self._state
            self._state = ModelState.LOADING

        logger.info("Loading model dari %s", source)
        try:
            model = self._loader(source)
        except Exception:
            logger.exception("Error loading model dari %s", source)
            with self._lock:
                self._state = ModelState.LOAD_FAILED
            return ModelState.LOAD_FAILED

        with self._lock:
            self._model = model
            self._state = ModelState.READY
        logger.info("Model loaded successfully")
        return ModelState.READY

    def load_in_background(self, source) -> threading.Thread:
        """
        Jalankan load() di daemon thread, supaya server langsung bisa terima request
        (request sebelum model siap akan dapat ModelNotReadyError).
        """
        t = threading.Thread(
            target=self.load,
            args=(source,),
            name="model-loader",
            daemon=True,
        )
        t.start()
        return t

    def predict(self, batch) -> float:
        # baca referensi model sekali; tidak ada lock di jalur inference
        model = self._model
        if self._state is not ModelState.READY or model is None:
            raise ModelNotReadyError()
        return predict_score(model, batch)
