"""Logging setup shared by the app factory and ``run.py``."""
import logging


def setup_logging(level="INFO"):
    """Configure the root logger once.

    Repeated calls (tests build many apps) leave existing handlers alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
