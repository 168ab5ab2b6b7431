import dataclasses
import re

import pytest

from cancer_app.models.prediction import PredictionRecord

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_create_derives_suggestion_and_metadata():
    record = PredictionRecord.create("Cancer")
    assert record.suggestion == "Segera periksa ke dokter!"
    assert len(record.id) == 36
    assert ISO_UTC.match(record.created_at)


def test_record_is_immutable():
    record = PredictionRecord.create("Non-cancer")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.result = "Cancer"


def test_mismatched_pair_is_rejected():
    with pytest.raises(ValueError):
        PredictionRecord(result="Cancer", suggestion="Penyakit kanker tidak terdeteksi.")


def test_unknown_result_is_rejected():
    with pytest.raises(ValueError):
        PredictionRecord(result="Maybe")


def test_history_item_duplicates_id():
    record = PredictionRecord.create("Non-cancer")
    item = record.to_history_item()
    assert item == {
        "id": record.id,
        "history": {
            "result": "Non-cancer",
            "createdAt": record.created_at,
            "suggestion": "Penyakit kanker tidak terdeteksi.",
            "id": record.id,
        },
    }
