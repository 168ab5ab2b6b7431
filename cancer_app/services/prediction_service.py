# cancer_app/services/prediction_service.py
import logging

from cancer_app.core.errors import (
    DecodeError,
    MissingInputError,
    ModelNotReadyError,
    PersistenceError,
    PredictionError,
    UnsupportedFormatError,
)
from cancer_app.ml.classification.policy import classify
from cancer_app.models.prediction import PredictionRecord
from cancer_app.utils.image_io import normalize_image

logger = logging.getLogger(__name__)

# error yang sudah punya pesan spesifik untuk client, diteruskan apa adanya
_PASSTHROUGH_ERRORS = (DecodeError, UnsupportedFormatError, ModelNotReadyError)


class PredictionService:
    """
    Orkestrasi 1 request prediksi:
      normalize -> engine.predict -> classify -> store.save

    engine: ClassificationEngine (atau objek lain dengan is_ready + predict)
    store:  PredictionStore (atau objek lain dengan save + list_all)
    """

    def __init__(self, engine, store, normalizer=normalize_image):
        self.engine = engine
        self.store = store
        self.normalizer = normalizer

    def handle_predict(self, image_bytes) -> PredictionRecord:
        if not self.engine.is_ready:
            raise ModelNotReadyError()

        if not image_bytes:
            raise MissingInputError()

        try:
            batch = self.normalizer(image_bytes)
            score = self.engine.predict(batch)
            result, _ = classify(score)

            record = PredictionRecord.create(result)
            logger.debug("Prediksi %s: score=%.4f result=%s", record.id, score, result)

            self.store.save(record)
        except _PASSTHROUGH_ERRORS:
            raise
        except PersistenceError as e:
            # detail sudah di-log oleh store; client cukup dapat pesan umum
            raise PredictionError() from e
        except Exception as e:
            logger.exception("Prediksi gagal")
            raise PredictionError() from e

        return record

    def handle_history(self) -> list[dict]:
        records = self.store.list_all()
        return [r.to_history_item() for r in records]
