import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

LevelSpec = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    A logging handler that routes records through `tqdm.write()`, so log lines
    do not tear up the per-file progress bar of the generate command.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Optional[LevelSpec], fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    if isinstance(level, int):
        return level
    return fallback


def configure_logger(
        general_level: Optional[LevelSpec] = "INFO",
        module_specific_levels: Optional[Dict[str, LevelSpec]] = None,
        silenced_loggers: Optional[Dict[str, LevelSpec]] = None,
) -> None:
    """
    Configures the root logger with a tqdm-friendly handler and applies
    per-module level overrides.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    # Muzzle noisy third party loggers.
    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))
