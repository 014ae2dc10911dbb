"""Predefined Programs — the fixed recipes every catalog is seeded with.

Invariants:
    - Identifiers and progress characters are mutually distinct across the seed set
    - No seed uses the reserved '.' progress character
    - Seeds are never custom: not deletable, not persisted
"""

from datetime import datetime, timezone

from microwave.core.program import Program

# Fixed so seeded programs do not look freshly created on every restart
_SEEDED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

# (identifier, name, food, seconds, power, progress_char, instructions)
PREDEFINED_PROGRAMS: tuple[tuple[str, str, str, int, int, str, str], ...] = (
    (
        "P", "Popcorn", "Popcorn (microwave bag)", 180, 7, "*",
        "Watch the popping interval. If more than 10 seconds pass between "
        "pops, stop the microwave.",
    ),
    (
        "M", "Milk", "Milk", 300, 5, "#",
        "Be careful heating liquids: abrupt temperature changes may boil "
        "over and cause burns.",
    ),
    (
        "R", "Beef", "Boneless beef", 840, 4, "~",
        "Pause halfway through and turn the meat over for even thawing.",
    ),
    (
        "C", "Chicken", "Chicken (any cut)", 480, 7, "+",
        "Pause halfway through and turn the chicken over for even thawing.",
    ),
    (
        "B", "Beans", "Beans", 480, 9, "@",
        "Leave the container uncovered. Plastic containers may melt from "
        "the heat and cause food contamination.",
    ),
)


def build_predefined_programs() -> list[Program]:
    return [
        Program.create(
            identifier=ident,
            name=name,
            food=food,
            duration_seconds=seconds,
            power=power,
            progress_char=char,
            instructions=instructions,
            is_custom=False,
            created_at=_SEEDED_AT,
        )
        for ident, name, food, seconds, power, char, instructions
        in PREDEFINED_PROGRAMS
    ]
