"""Status Formatting — pure rendering of session status text and progress runs.

Invariants:
    - Every function is PURE: same inputs produce the same string, no state read
    - Durations < 60s render as "{s}s"; >= 60s as "{m}m {s}s"
    - Progress emits one run of power * char per remaining second, space separated
    - Zero remaining seconds produces an empty progress block

Design Decisions:
    - Status computed on read from (state, total, remaining, power, char), never cached:
      no stale text when a caller mutates without a recompute step
"""

from microwave.core.domain_types import HeatingState


def format_duration(seconds: int) -> str:
    """Render seconds the way the control panel shows them."""
    if seconds < 60:
        return f"{seconds}s"
    minutes, rest = divmod(seconds, 60)
    return f"{minutes}m {rest}s"


def render_progress(remaining_seconds: int, power: int, progress_char: str) -> str:
    """One run of progress_char * power per remaining second, oldest first."""
    if remaining_seconds <= 0:
        return ""
    run = progress_char * power
    return " ".join(run for _ in range(remaining_seconds))


def render_status(
    state: HeatingState,
    total_seconds: int,
    remaining_seconds: int,
    power: int,
    progress_char: str,
) -> str:
    if state is HeatingState.IDLE:
        return (
            f"Microwave idle. Time: {format_duration(total_seconds)} "
            f"| Power: {power}"
        )
    if state is HeatingState.HEATING:
        progress = render_progress(remaining_seconds, power, progress_char)
        return (
            f"Heating... Time remaining: {format_duration(remaining_seconds)} "
            f"| Power: {power}\n{progress}"
        )
    if state is HeatingState.PAUSED:
        return (
            f"Heating paused. Time remaining: {format_duration(remaining_seconds)} "
            f"| Power: {power}"
        )
    return f"Heating complete! Total time: {format_duration(total_seconds)}"
