"""
Append-only trip history stored as a plain-text file.

Every save opens, appends and closes the file within one ``with`` block;
there is a single writer, so no locking is needed.  Reads are a raw
line-by-line passthrough, nothing is parsed back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from trip_estimator.domain.entities import TripContext
from trip_estimator.domain.errors import PersistenceFailure
from trip_estimator.reporting import format_log_block

logger = logging.getLogger(__name__)


class TripLog:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, ctx: TripContext, total: float) -> None:
        """Append the summary block for *ctx*; raise ``PersistenceFailure`` on I/O errors."""
        block = format_log_block(ctx, total)
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write("\n".join(block) + "\n")
        except OSError as exc:
            logger.warning("Could not append to %s: %s", self.path, exc)
            raise PersistenceFailure(str(exc)) from exc
        logger.info("Saved trip %r to %s", ctx.trip_name, self.path)

    def read_lines(self) -> Optional[list[str]]:
        """Return the logged lines, or ``None`` when no log file exists yet."""
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            raise PersistenceFailure(str(exc)) from exc
