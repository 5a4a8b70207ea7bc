# utils/log.py - shared logger factory
import logging


def get_logger(name: str = "salesmanago"):
    """
    Return the logger for `name`.

    Only the top-level logger of a dotted name ("salesmanago" for
    "salesmanago.http") gets the stream handler; children propagate to it
    so each record is printed once.
    """
    root = logging.getLogger(name.split(".", 1)[0])
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)
