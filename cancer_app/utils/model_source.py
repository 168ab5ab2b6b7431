# cancer_app/utils/model_source.py
import os
import hashlib
from urllib.parse import urlparse


def is_remote_source(source: str) -> bool:
    return urlparse(str(source)).scheme in ("http", "https")


def cache_location(source: str) -> tuple[str, str]:
    """
    URL model -> (subdir, fname) untuk cache lokal.
    - fname: nama file asli (keras butuh ekstensi .keras / .h5)
    - subdir: per-URL, supaya 2 URL dengan nama file sama tidak saling timpa
    """
    source = str(source)
    fname = os.path.basename(urlparse(source).path) or "model.keras"
    subdir = hashlib.sha1(source.encode("utf-8")).hexdigest()[:12]
    return subdir, fname
