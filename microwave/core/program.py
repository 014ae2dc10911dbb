"""Program — a named heating recipe that instantiates independent sessions.

Invariants:
    - identifier is exactly one character, stored upper-case
    - progress_char is exactly one character
    - name is non-empty after stripping
    - instantiate() never keeps a back-reference from session to program
    - Durations use bypass mode: recipes may exceed the manual 120s ceiling

Design Decisions:
    - Catalog-level rules (uniqueness, reserved '.') live in ProgramCatalog, not here:
      a Program only knows its own shape
    - from_record() re-validates everything: persisted data is untrusted
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from microwave.core.domain_types import ProgramIdentifier, SessionId
from microwave.core.errors import InvalidProgramError
from microwave.core.heating_session import HeatingSession
from microwave.core.repository_protocols import ProgramRecord
from microwave.core.snapshots import ProgramSnapshot
from microwave.core.value_objects import Duration, Power


def normalize_identifier(identifier: str) -> ProgramIdentifier:
    """Upper-case a one-character identifier. Raises InvalidProgramError otherwise."""
    if not isinstance(identifier, str) or len(identifier.strip()) != 1:
        raise InvalidProgramError(
            f"Program identifier must be exactly one character, got {identifier!r}",
            "identifier",
        )
    return ProgramIdentifier(identifier.strip().upper())


@dataclass(frozen=True)
class Program:
    identifier: ProgramIdentifier
    name: str
    food: str
    duration: Duration
    power: Power
    progress_char: str
    instructions: str = ""
    is_custom: bool = True
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @classmethod
    def create(
        cls,
        identifier: str,
        name: str,
        food: str,
        duration_seconds: int,
        power: int,
        progress_char: str,
        instructions: str = "",
        is_custom: bool = True,
        created_at: datetime | None = None,
    ) -> "Program":
        """Validate raw fields and build a Program. Power/Duration raise OutOfRangeError."""
        ident = normalize_identifier(identifier)
        if not isinstance(progress_char, str) or len(progress_char) != 1:
            raise InvalidProgramError(
                f"Progress character must be exactly one character, got {progress_char!r}",
                "progress_char", ident,
            )
        if progress_char.isspace():
            raise InvalidProgramError(
                "Progress character cannot be whitespace", "progress_char", ident,
            )
        if not isinstance(name, str) or not name.strip():
            raise InvalidProgramError(
                "Program name cannot be empty", "name", ident,
            )
        food = "" if food is None else food
        instructions = "" if instructions is None else instructions
        for label, text in (("food", food), ("instructions", instructions)):
            if not isinstance(text, str):
                raise InvalidProgramError(
                    f"Program {label} must be text, got {type(text).__name__}",
                    label, ident,
                )
        return cls(
            identifier=ident,
            name=name.strip(),
            food=food.strip(),
            duration=Duration(duration_seconds, bypass=True),
            power=Power(power),
            progress_char=progress_char,
            instructions=instructions,
            is_custom=is_custom,
            created_at=created_at or datetime.now(timezone.utc),
        )

    def instantiate(self, session_id: SessionId) -> HeatingSession:
        """New IDLE session parameterized by this recipe."""
        return HeatingSession(
            session_id,
            Duration(self.duration.seconds, bypass=True),
            self.power,
            self.progress_char,
        )

    # --- Conversion ------------------------------------------------------------

    def to_record(self) -> ProgramRecord:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "food": self.food,
            "duration_seconds": self.duration.seconds,
            "power": self.power.value,
            "progress_char": self.progress_char,
            "instructions": self.instructions,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: ProgramRecord) -> "Program":
        """Rebuild a custom program from persisted data. Raises on malformed records."""
        created_raw = record.get("created_at")
        created_at = (
            datetime.fromisoformat(created_raw) if created_raw else None
        )
        return cls.create(
            identifier=record["identifier"],
            name=record["name"],
            food=record.get("food", ""),
            duration_seconds=record["duration_seconds"],
            power=record["power"],
            progress_char=record["progress_char"],
            instructions=record.get("instructions", ""),
            is_custom=True,
            created_at=created_at,
        )

    def snapshot(self) -> ProgramSnapshot:
        return ProgramSnapshot(
            identifier=self.identifier,
            name=self.name,
            food=self.food,
            duration_seconds=self.duration.seconds,
            duration_display=self.duration.display,
            power=self.power.value,
            instructions=self.instructions,
            progress_char=self.progress_char,
            is_custom=self.is_custom,
            created_at=self.created_at,
        )
