# cancer_app/ml/classification/policy.py

CANCER = "Cancer"
NON_CANCER = "Non-cancer"

# threshold tetap; skor tepat 0.5 masuk Non-cancer (strict >)
CANCER_THRESHOLD = 0.5

SUGGESTIONS = {
    CANCER: "Segera periksa ke dokter!",
    NON_CANCER: "Penyakit kanker tidak terdeteksi.",
}


def label_for_score(raw_score: float) -> str:
    return CANCER if raw_score > CANCER_THRESHOLD else NON_CANCER


def suggestion_for(result: str) -> str:
    return SUGGESTIONS[result]


def classify(raw_score: float) -> tuple[str, str]:
    """
    raw_score: skor sigmoid model dalam [0, 1]
    return: (result, suggestion)
    """
    result = label_for_score(raw_score)
    return result, suggestion_for(result)
