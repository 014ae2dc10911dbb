"""Program Catalog — in-memory, optionally disk-mirrored set of heating programs.

Invariants:
    - Identifiers are unique (case-insensitive, stored upper-case)
    - Progress characters are unique across predefined AND custom programs
    - '.' is reserved for manual heating and never used by a program
    - Predefined programs are seeded at construction and can be neither added nor removed
    - A rejected add/remove leaves the catalog exactly as it was
    - add/remove/clear and the persistence write happen under one lock

Design Decisions:
    - Explicit instance injected into services, not a module-level singleton
    - Checks ordered identifier -> reserved char -> duplicate char: the first broken
      rule is the one reported
    - Loading is lenient (skip bad records), adding is strict (raise): persisted data
      may predate the current rules, live requests may not
    - No logging here (core is pure); skipped records are reported via last_skipped
"""

import threading

from microwave.core.domain_types import DEFAULT_PROGRESS_CHAR
from microwave.core.errors import (
    DuplicateCharError,
    DuplicateIdentifierError,
    InvalidProgramError,
    MicrowaveError,
    ProgramNotFoundError,
    ProtectedProgramError,
    ReservedCharError,
)
from microwave.core.program import Program, normalize_identifier
from microwave.core.repository_protocols import ProgramRecord, ProgramRepository
from microwave.core.seed_programs import build_predefined_programs


class ProgramCatalog:
    """Keyed collection of Programs enforcing identifier/char uniqueness."""

    def __init__(self, repository: ProgramRepository | None = None):
        self._repository = repository
        self._lock = threading.RLock()
        self._programs: dict[str, Program] = {}
        self.last_skipped: list[ProgramRecord] = []
        self.clear()

    # --- Reads -----------------------------------------------------------------

    def get(self, identifier: str) -> Program | None:
        """Case-insensitive lookup. None when absent or malformed."""
        key = _lookup_key(identifier)
        if key is None:
            return None
        with self._lock:
            return self._programs.get(key)

    def require(self, identifier: str) -> Program:
        program = self.get(identifier)
        if program is None:
            raise ProgramNotFoundError(str(identifier))
        return program

    def list_all(self) -> list[Program]:
        with self._lock:
            return list(self._programs.values())

    def list_custom(self) -> list[Program]:
        return [p for p in self.list_all() if p.is_custom]

    def list_predefined(self) -> list[Program]:
        return [p for p in self.list_all() if not p.is_custom]

    def __len__(self) -> int:
        with self._lock:
            return len(self._programs)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.get(identifier) is not None

    # --- Mutations -------------------------------------------------------------

    def add(self, program: Program) -> Program:
        """Add a custom program and persist. Raises on any uniqueness violation."""
        if not program.is_custom:
            raise InvalidProgramError(
                "Predefined programs cannot be added at runtime",
                "is_custom", program.identifier,
            )
        with self._lock:
            self._check_can_add(program)
            self._programs[program.identifier] = program
            self._persist()
        return program

    def remove(self, identifier: str) -> Program:
        """Remove a custom program and persist."""
        with self._lock:
            program = self.require(identifier)
            if not program.is_custom:
                raise ProtectedProgramError(program.identifier)
            del self._programs[program.identifier]
            self._persist()
        return program

    def clear(self) -> None:
        """Reset to the predefined set, then reload persisted custom programs."""
        with self._lock:
            self._programs = {p.identifier: p for p in build_predefined_programs()}
            self.last_skipped = []
            for record in self._load_records():
                if not isinstance(record, dict):
                    self.last_skipped.append(record)
                    continue
                try:
                    program = Program.from_record(record)
                    self._check_can_add(program)
                except (MicrowaveError, KeyError, TypeError, ValueError):
                    self.last_skipped.append(record)
                    continue
                self._programs[program.identifier] = program

    # --- Internals -------------------------------------------------------------

    def _check_can_add(self, program: Program) -> None:
        if program.identifier in self._programs:
            raise DuplicateIdentifierError(program.identifier)
        if program.progress_char == DEFAULT_PROGRESS_CHAR:
            raise ReservedCharError(program.progress_char)
        for existing in self._programs.values():
            if existing.progress_char == program.progress_char:
                raise DuplicateCharError(program.progress_char, existing.identifier)

    def _load_records(self) -> list:
        if self._repository is None:
            return []
        return list(self._repository.load_custom_programs() or [])

    def _persist(self) -> None:
        if self._repository is None:
            return
        self._repository.save_custom_programs(
            [p.to_record() for p in self._programs.values() if p.is_custom],
        )


def _lookup_key(identifier: object) -> str | None:
    try:
        return normalize_identifier(identifier)  # type: ignore[arg-type]
    except InvalidProgramError:
        return None
