"""Catalog Service — thin facade over ProgramCatalog for the API layer.

Invariants:
    - Programs created here are always custom
    - Callers receive ProgramSnapshot, never the Program itself
    - Domain errors from the catalog propagate unchanged
"""

import logging

from microwave.core.program import Program
from microwave.core.program_catalog import ProgramCatalog
from microwave.core.snapshots import ProgramSnapshot

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, catalog: ProgramCatalog):
        self._catalog = catalog

    def add_program(
        self,
        identifier: str,
        name: str,
        food: str,
        duration_seconds: int,
        power: int,
        progress_char: str,
        instructions: str = "",
    ) -> ProgramSnapshot:
        program = Program.create(
            identifier=identifier,
            name=name,
            food=food,
            duration_seconds=duration_seconds,
            power=power,
            progress_char=progress_char,
            instructions=instructions,
            is_custom=True,
        )
        self._catalog.add(program)
        logger.info(
            f"Custom program '{program.name}' added",
            extra={"program_identifier": program.identifier},
        )
        return program.snapshot()

    def remove_program(self, identifier: str) -> None:
        program = self._catalog.remove(identifier)
        logger.info(
            f"Custom program '{program.name}' removed",
            extra={"program_identifier": program.identifier},
        )

    def get_program(self, identifier: str) -> ProgramSnapshot | None:
        program = self._catalog.get(identifier)
        return program.snapshot() if program else None

    def list_all(self) -> list[ProgramSnapshot]:
        return [p.snapshot() for p in self._catalog.list_all()]

    def list_custom(self) -> list[ProgramSnapshot]:
        return [p.snapshot() for p in self._catalog.list_custom()]

    def list_predefined(self) -> list[ProgramSnapshot]:
        return [p.snapshot() for p in self._catalog.list_predefined()]

    def reload(self) -> int:
        """Re-read persisted custom programs. Returns how many records were skipped."""
        self._catalog.clear()
        skipped = len(self._catalog.last_skipped)
        if skipped:
            logger.warning(f"Skipped {skipped} invalid persisted program record(s)")
        return skipped
