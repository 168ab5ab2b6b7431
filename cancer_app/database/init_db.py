# cancer_app/database/init_db.py
import logging

from cancer_app.core.config import Config
from cancer_app.core.logging_setup import configure_logging
from cancer_app.services.history_service import PredictionStore

logger = logging.getLogger(__name__)


def main():
    configure_logging(Config.LOG_LEVEL)
    logger.info("Creating tables...")
    PredictionStore().create_tables()
    logger.info("Done.")

if __name__ == "__main__":
    main()
