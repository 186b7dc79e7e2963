import logging
import sys
from pythonjsonlogger import jsonlogger
from lucid_gateway.core.config import settings

_HANDLER_NAME = "lucid-gateway-json"


def setup_logging(level: str | None = None):
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    # create_app() may run more than once per process (tests, reloads)
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.set_name(_HANDLER_NAME)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    log_handler.setFormatter(formatter)
    root_logger.addHandler(log_handler)
