"""The shell's ordered set of environment variables."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple


def split_assignment(assignment: str) -> Tuple[str, str]:
    """Split ``KEY=VALUE`` at the first ``=``; raise ValueError if there is none."""
    key, sep, value = assignment.partition("=")
    if not sep:
        raise ValueError(f"not an assignment: {assignment!r}")
    return key, value


class Environment:
    """Environment variables kept in the order they were defined."""

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()) -> None:
        self._vars: Dict[str, str] = dict(pairs)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``KEY=VALUE`` strings."""
        return cls(split_assignment(entry) for entry in entries)

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None if it is not set."""
        return self._vars.get(key)

    def assign(self, assignment: str) -> None:
        """Apply ``KEY=VALUE``: update an existing key in place or append a new one."""
        key, value = split_assignment(assignment)
        self._vars[key] = value

    def remove(self, key: str) -> bool:
        """Remove ``key`` if present; tell whether anything was removed."""
        return self._vars.pop(key, None) is not None

    def items(self) -> List[Tuple[str, str]]:
        """Return the (key, value) pairs in order."""
        return list(self._vars.items())

    def sort(self) -> None:
        """Reorder the variables by key."""
        self._vars = dict(sorted(self._vars.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)