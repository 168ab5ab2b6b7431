# cancer_app/models/prediction.py
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text

from cancer_app.database.db import Base
from cancer_app.ml.classification.policy import SUGGESTIONS, suggestion_for


def _new_id() -> str:
    return str(uuid.uuid4())


def _now_iso() -> str:
    # contoh: 2024-05-01T10:20:30.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class PredictionRecord:
    """
    Hasil 1 prediksi yang disimpan.
    suggestion selalu diturunkan dari result; pasangan yang tidak cocok ditolak.
    """
    result: str
    suggestion: str = ""
    id: str = field(default_factory=_new_id)
    created_at: str = field(default_factory=_now_iso)

    def __post_init__(self):
        if self.result not in SUGGESTIONS:
            raise ValueError(f"result tidak dikenal: {self.result!r}")
        expected = suggestion_for(self.result)
        if not self.suggestion:
            object.__setattr__(self, "suggestion", expected)
        elif self.suggestion != expected:
            raise ValueError("suggestion tidak sesuai dengan result")
        if not self.id:
            raise ValueError("id wajib")
        if not self.created_at:
            raise ValueError("created_at wajib")

    @classmethod
    def create(cls, result: str) -> "PredictionRecord":
        return cls(result=result)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "result": self.result,
            "suggestion": self.suggestion,
            "createdAt": self.created_at,
        }

    def to_history_item(self) -> dict:
        return {
            "id": self.id,
            "history": {
                "result": self.result,
                "createdAt": self.created_at,
                "suggestion": self.suggestion,
                "id": self.id,
            },
        }


class Prediction(Base):
    __tablename__ = "predictions"

    id = Column(String(36), primary_key=True, index=True)
    result = Column(String(16), nullable=False)
    suggestion = Column(Text, nullable=False)

    # disimpan sebagai ISO string apa adanya (tidak berubah setelah ditulis)
    created_at = Column(String(32), nullable=False)

    @classmethod
    def from_record(cls, record: PredictionRecord) -> "Prediction":
        return cls(
            id=record.id,
            result=record.result,
            suggestion=record.suggestion,
            created_at=record.created_at,
        )

    def to_record(self) -> PredictionRecord:
        return PredictionRecord(
            id=self.id,
            result=self.result,
            suggestion=self.suggestion,
            created_at=self.created_at,
        )
