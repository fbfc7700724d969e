import logging
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a console handler, once.

    Repeated calls (app reloads, test sessions) leave existing handlers alone.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
