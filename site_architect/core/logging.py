"""Logging setup: one readable line per record, `extra=` fields appended as JSON."""

import json
import logging
import sys

from site_architect.config import settings

# Attributes every LogRecord carries; anything else on a record came from `extra=`.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONExtrasFormatter(logging.Formatter):
    """Format ``time | LEVEL | logger | message {"extra": "fields"}``.

    Tracebacks from ``logger.exception`` follow on the next lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"{self.formatTime(record, self.datefmt)} | {record.levelname:<8} | "
            f"{record.name} | {record.getMessage()}"
        )

        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if extras:
            line = f"{line} {json.dumps(extras, default=str, ensure_ascii=False)}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str | None = None) -> None:
    """Attach the console handler to the 'site_architect' logger and set its level.

    Repeated calls only change the level; the handler is added once.
    """
    logger = logging.getLogger("site_architect")
    resolved_level = logging.getLevelName((level or settings.log_level).upper())
    logger.setLevel(resolved_level if isinstance(resolved_level, int) else logging.INFO)

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    # Own handler only; the root logger would print every line twice.
    logger.propagate = False
