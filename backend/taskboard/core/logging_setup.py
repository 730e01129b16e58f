import logging
import sys

FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "taskboard-console"


def setup_logging(level: str | int = "INFO") -> None:
    """
    Install a single stderr handler on the root logger.

    Safe to call more than once (uvicorn reloads, Streamlit reruns): the
    handler is only added the first time, later calls just adjust the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(_HANDLER_NAME)
    ch.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATEFMT))
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
