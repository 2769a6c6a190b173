# logging_config.py
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger with a console handler, once.
    Later calls (tests, repeated app startups) leave existing handlers alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
