"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Catalog persistence accessed only through ProgramRepository
    - Both port methods are best-effort: implementations log failures, never raise
      domain errors, and never corrupt the in-memory catalog

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous port: the catalog write is a small local file, and the catalog lock
      must cover the write to keep uniqueness consistent with what is persisted
    - Sessions have no port: in-memory only, lost on restart (accepted behavior)
"""

from typing import Protocol, TypedDict


class ProgramRecord(TypedDict, total=False):
    """Persisted shape of one custom program."""
    identifier: str
    name: str
    food: str
    duration_seconds: int
    power: int
    progress_char: str
    instructions: str
    created_at: str


class ProgramRepository(Protocol):
    """Contract for custom program persistence — implemented by shell."""
    def load_custom_programs(self) -> list[ProgramRecord]: ...
    def save_custom_programs(self, records: list[ProgramRecord]) -> None: ...


class InMemoryProgramRepository:
    """Process-local ProgramRepository. Used in tests and when persistence is off."""

    def __init__(self, records: list[ProgramRecord] | None = None):
        self.records: list[ProgramRecord] = list(records or [])
        self.save_count = 0

    def load_custom_programs(self) -> list[ProgramRecord]:
        return list(self.records)

    def save_custom_programs(self, records: list[ProgramRecord]) -> None:
        self.records = list(records)
        self.save_count += 1
