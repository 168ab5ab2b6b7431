# cancer_app/core/logging_setup.py
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Setup logging root sekali saat create_app().
    Kalau root logger sudah punya handler (mis. di pytest / gunicorn), basicConfig tidak menimpa.
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
