"""Longest-run counting used to size code fences."""

import re
from functools import lru_cache


@lru_cache(maxsize=8)
def _run_pattern(char: str) -> re.Pattern[str]:
    return re.compile(f"{re.escape(char)}+")


def count_max_streak(fragment: str, char: str, carry_in: int = 0) -> tuple[int, int]:
    """Count the longest run of ``char`` in a fragment.

    ``carry_in`` is the length of a run left open at the end of the previous
    fragment, so a run split across appended pieces is counted as one.

    Args:
        fragment: Text to scan
        char: The single character whose runs are counted
        carry_in: Open run carried over from the preceding fragment

    Returns:
        ``(max_streak, trailing_streak)``: the longest run seen in
        ``carry_in ++ fragment`` and the run still open at its end
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    if not fragment:
        return carry_in, carry_in

    longest = carry_in
    trailing = 0
    for match in _run_pattern(char).finditer(fragment):
        run = match.end() - match.start()
        if match.start() == 0:
            run += carry_in
        longest = max(longest, run)
        trailing = run if match.end() == len(fragment) else 0
    return longest, trailing
