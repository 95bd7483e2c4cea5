import logging

_CONFIGURED_FLAG = "_pqview_configured"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="WARNING", path=None):
    """Send log records to `path`; curses owns the terminal, so never to stderr.

    Safe to call more than once: only the first call installs a handler.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG, False):
        return root

    handler = logging.NullHandler()
    if path:
        try:
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    setattr(root, _CONFIGURED_FLAG, True)
    return root
