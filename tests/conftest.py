"""
Pytest configuration for cancer-prediction-backend tests.

No test needs TensorFlow or a live MySQL: the engine gets a fake Keras-like
model and the store runs on in-memory SQLite.
"""

import io
import os

# harus diset sebelum cancer_app di-import (engine DB dibuat saat import)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MODEL_AUTOLOAD", "0")

import numpy as np
import pytest
from PIL import Image

from cancer_app import create_app
from cancer_app.core.config import Config
from cancer_app.database.db import make_session_factory
from cancer_app.ml.classification.engine import ClassificationEngine
from cancer_app.services.history_service import PredictionStore


class FakeModel:
    """Mimics keras.Model.predict for a sigmoid head: returns shape (1, 1)."""

    def __init__(self, score=0.8):
        self.score = score
        self.calls = []

    def predict(self, batch, verbose=0):
        self.calls.append(batch)
        return np.array([[self.score]], dtype=np.float32)


class AppTestConfig(Config):
    TESTING = True
    MODEL_AUTOLOAD = False
    DB_AUTO_CREATE = False
    API_PREFIX = ""


def make_image_bytes(mode="RGB", size=(64, 48), fmt="PNG"):
    if mode in ("RGB", "RGBA"):
        color = (200, 30, 30) if mode == "RGB" else (200, 30, 30, 128)
    else:
        color = 128
    img = Image.new(mode, size, color=color)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return make_image_bytes()


@pytest.fixture
def fake_model():
    return FakeModel(score=0.8)


@pytest.fixture
def ready_engine(fake_model):
    engine = ClassificationEngine(loader=lambda source: fake_model)
    engine.load("fake://model")
    return engine


@pytest.fixture
def session_factory():
    # in-memory baru per test (StaticPool, 1 koneksi)
    return make_session_factory("sqlite://")


@pytest.fixture
def store(session_factory):
    s = PredictionStore(session_factory=session_factory)
    s.create_tables()
    return s


@pytest.fixture
def app(ready_engine, store):
    return create_app(AppTestConfig, engine=ready_engine, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_image():
    return make_image_bytes


@pytest.fixture
def app_config():
    return AppTestConfig
