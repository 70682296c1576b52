import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

# HTTP client internals and the flask dev server are noisy at INFO.
_THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "urllib3", "werkzeug")


def configure_logging(*, verbose: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Without ``verbose`` the root level is INFO and the third-party loggers
    are held at WARNING. With it the root goes to DEBUG and they inherit.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)

    third_party_level = logging.NOTSET if verbose else logging.WARNING
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)


def enable_access_log() -> None:
    """Let the flask dev server log one line per request."""
    logging.getLogger("werkzeug").setLevel(logging.INFO)
