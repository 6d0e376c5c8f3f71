"""Configuration — variables d'environnement + logging."""
import logging
import os
from typing import Optional

LOG_LEVEL          = os.getenv("TEMPLATE_SCHEMA_LOG_LEVEL", "INFO").upper()
LOG_MAX_VIOLATIONS = int(os.getenv("TEMPLATE_SCHEMA_LOG_MAX_VIOLATIONS", "5"))
LOG_FORMAT         = "%(asctime)s %(levelname)s — %(message)s"


def configure_logging(level: Optional[str] = None):
    """À appeler une fois par le service hôte (Generation / Edit)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
