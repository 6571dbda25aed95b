"""Compact human-readable rendering of elapsed durations."""

from __future__ import annotations

from datetime import timedelta


def human_readable_duration(duration: timedelta) -> str:
    """Render *duration* as e.g. ``"1 h 2 min 3 sec"``.

    Zero-valued components are omitted and fractions of a second are
    truncated.  Anything below one second is ``"less than a second"``.
    """
    if duration < timedelta(seconds=1):
        return "less than a second"

    minutes, seconds = divmod(int(duration.total_seconds()), 60)
    hours, minutes = divmod(minutes, 60)

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours} h")
    if minutes > 0:
        parts.append(f"{minutes} min")
    if seconds > 0:
        parts.append(f"{seconds} sec")

    return " ".join(parts)
