import logging
import sys

_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the `cia` logger.

    Module loggers (`logging.getLogger(__name__)`) propagate here. Calling this
    more than once only updates the level.
    """

    root = logging.getLogger("cia")
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    return root
