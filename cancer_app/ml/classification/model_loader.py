# cancer_app/ml/classification/model_loader.py
import os

import tensorflow as tf

from cancer_app.core.config import Config
from cancer_app.utils.model_source import cache_location, is_remote_source


def resolve_model_path(source: str, cache_dir: str | None = None) -> str:
    """
    source bisa path lokal atau URL.
    URL di-download sekali ke MODEL_CACHE_DIR (cache per-URL), lalu path lokalnya dipakai.
    """
    source = str(source)
    if not is_remote_source(source):
        if not os.path.exists(source):
            raise FileNotFoundError(f"Model tidak ditemukan: {source}")
        return source

    cache_dir = cache_dir or Config.MODEL_CACHE_DIR
    os.makedirs(cache_dir, exist_ok=True)

    subdir, fname = cache_location(source)
    return tf.keras.utils.get_file(
        fname=fname,
        origin=source,
        cache_dir=cache_dir,
        cache_subdir=subdir,
    )


def load_classification_model(source: str):
    """
    Load model klasifikasi biner (output sigmoid 1 unit).
    Tidak perlu compile, model cuma dipakai untuk inference.
    """
    path = resolve_model_path(source)
    return tf.keras.models.load_model(path, compile=False)
