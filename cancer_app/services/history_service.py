# cancer_app/services/history_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from cancer_app.core.errors import PersistenceError
from cancer_app.database.db import Base, SessionLocal
from cancer_app.models.prediction import Prediction, PredictionRecord

logger = logging.getLogger(__name__)


class PredictionStore:
    """
    Penyimpanan record prediksi (SQLAlchemy).
    Tiap operasi buka session sendiri: commit penuh atau rollback, tidak ada record setengah jadi.
    """

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def create_tables(self):
        db = self.session_factory()
        try:
            Base.metadata.create_all(bind=db.get_bind(), tables=[Prediction.__table__])
        finally:
            db.close()

    def save(self, record: PredictionRecord) -> PredictionRecord:
        db = self.session_factory()
        try:
            # merge = upsert per id, row lain tidak tersentuh
            db.merge(Prediction.from_record(record))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("DB error saat menyimpan prediksi %s: %s", record.id, e)
            raise PersistenceError() from e
        finally:
            db.close()

        logger.info("Prediction with ID %s saved", record.id)
        return record

    def list_all(self) -> list[PredictionRecord]:
        db = self.session_factory()
        try:
            rows = db.query(Prediction).all()
            return [r.to_record() for r in rows]
        except SQLAlchemyError as e:
            logger.error("DB error saat membaca history prediksi: %s", e)
            raise PersistenceError() from e
        except (ValueError, TypeError) as e:
            # row di DB tidak valid (result/suggestion tidak cocok dsb.)
            logger.error("Data history prediksi tidak valid: %s", e)
            raise PersistenceError() from e
        finally:
            db.close()
