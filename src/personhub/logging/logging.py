# personhub/logging/logging.py
import os
import logging
import sys
from pathlib import Path

from .config import load_log_level

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# names of loggers that already carry our handlers
_LOGGER_INITIALIZED = {}


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("PERSONHUB_LOG_DIR", Path.home() / ".personhub" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / "personhub.log"


def get_logger(
    name="personhub",
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    fmt=DEFAULT_FORMAT,
    datefmt=DEFAULT_DATEFMT,
    propagate=False,
):
    """Return logger ``name``, attaching handlers on first use.

    Parameters
    ----------
    name : str
        Logger name. Modules pass ``__file__``.
    level : int, optional
        Explicit level. When omitted the persisted level from
        :func:`personhub.logging.config.load_log_level` is used, else INFO.
    log_file, log_dir : path-like, optional
        Target file, or directory for ``personhub.log``. Defaults to
        ``$PERSONHUB_LOG_DIR`` or ``~/.personhub/logs``.
    console : bool
        Also write to stderr.

    Later calls with the same name return the configured logger unchanged;
    use :func:`reset_logger` to reconfigure.
    """
    logger = logging.getLogger(name)
    if _LOGGER_INITIALIZED.get(name, False):
        return logger

    if level is None:
        level = load_log_level() or logging.INFO
    logger.setLevel(level)
    logger.propagate = propagate
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    file_path = _resolve_log_file(log_file, log_dir)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(file_path, mode=filemode, encoding="utf-8")
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    _LOGGER_INITIALIZED[name] = True
    return logger


def reset_logger(name=None):
    """Detach and close handlers so loggers can be configured again.

    Parameters
    ----------
    name : str, optional
        Logger to reset. All loggers configured through :func:`get_logger`
        are reset when omitted.
    """
    names = list(_LOGGER_INITIALIZED) if name is None else [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _LOGGER_INITIALIZED.pop(n, None)


def get_configured_level(name="personhub"):
    """Return the effective level name for ``name``."""

    level = logging.getLogger(name).getEffectiveLevel()
    return logging.getLevelName(level)
