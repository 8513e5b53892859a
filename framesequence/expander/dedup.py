"""Deduplication of expanded frame lists."""

from __future__ import annotations

from collections.abc import Iterable


def remove_duplicates(frames: Iterable[int]) -> list[int]:
    """Keep the first occurrence of every frame, preserving order."""
    seen: set[int] = set()
    result: list[int] = []
    for frame in frames:
        if frame in seen:
            continue
        seen.add(frame)
        result.append(frame)
    return result
