import logging
import sys

from storefront.core.config import settings

_configured = False


def setup_logging() -> None:
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    root.setLevel(level)

    # Avoid duplicate handlers (uvicorn / pytest may already attach some)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        root.addHandler(handler)

    _configured = True
