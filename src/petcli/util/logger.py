import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from petcli.util.dirs import DEFAULT_HOME, ensure_dirs

LOGGER_NAME = "petcli"


def setup_mode(*, is_debug: bool) -> None:
    # basicConfig would attach a stderr handler, which corrupts the curses screen
    if is_debug:
        logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)
    else:
        logging.getLogger(LOGGER_NAME).setLevel(logging.INFO)


def setup_logger(
    name: str,
    *,
    is_stream: bool = True,
    is_file: bool = True,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        # already configured by another module
        return logger
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if is_stream or not is_file:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if is_file:
        ensure_dirs()
        time_rotate_file_handler = TimedRotatingFileHandler(
            (Path(DEFAULT_HOME) / f"{name.lower()}.log").as_posix(),
            when="MIDNIGHT",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        time_rotate_file_handler.setLevel(logging.DEBUG)
        time_rotate_file_handler.setFormatter(formatter)
        logger.addHandler(time_rotate_file_handler)

    if not is_stream:
        # keep records away from the root logger's stderr handler
        logger.propagate = False

    return logger
