"""JSON Program Repository — best-effort file mirror for custom programs.

Invariants:
    - load never raises: missing file, unreadable file, corrupt JSON, or a non-list
      payload all mean "no custom programs"
    - save never raises: OSError is logged and swallowed, in-memory catalog stays
      authoritative for the life of the process
    - Writes are atomic (temp file + os.replace): a crash never leaves half a file

Design Decisions:
    - Plain json module: records are flat dicts, no schema layer needed on disk
    - Record-level validation left to the catalog (it already skips bad records)
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from microwave.core.repository_protocols import ProgramRecord

logger = logging.getLogger(__name__)


class JsonProgramRepository:
    """ProgramRepository backed by a local JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load_custom_programs(self) -> list[ProgramRecord]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(
                f"Ignoring unreadable program file {self.path}: {e}",
            )
            return []
        if not isinstance(payload, list):
            logger.warning(
                f"Ignoring program file {self.path}: expected a list, "
                f"got {type(payload).__name__}",
            )
            return []
        return payload

    def save_custom_programs(self, records: list[ProgramRecord]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".programs-", suffix=".json",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.info(
                f"Saved {len(records)} custom program(s) to {self.path}",
            )
        except OSError as e:
            logger.error(
                f"Failed to save custom programs to {self.path}: {e}",
                exc_info=True,
            )
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
