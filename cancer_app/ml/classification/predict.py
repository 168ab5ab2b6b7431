# cancer_app/ml/classification/predict.py
import math
import numpy as np


def extract_score(output) -> float:
    """
    Ambil 1 skor confidence dari output model.

    output bisa:
      - numpy / tensor shape (1, 1) dari model.predict()
      - dict {nama_output: array} (model dengan named outputs)

    return: float dalam [0, 1]
    """
    if isinstance(output, dict):
        if not output:
            raise ValueError("Output model kosong.")
        output = next(iter(output.values()))

    flat = np.asarray(output, dtype=np.float64).reshape(-1)
    if flat.size == 0:
        raise ValueError("Output model kosong.")

    score = float(flat[0])
    if not math.isfinite(score):
        raise ValueError(f"Skor model tidak valid: {score}")

    return min(max(score, 0.0), 1.0)


def predict_score(model, batch) -> float:
    """
    batch: numpy (1, H, W, 3) hasil normalize_image()
    Satu kali forward pass, verbose=0 biar log Keras tidak spam per request.
    """
    preds = model.predict(batch, verbose=0)
    return extract_score(preds)
