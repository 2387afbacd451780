# store.py - in-memory key/value store for kvshell
from __future__ import annotations

from typing import Optional


class Store:
    """Session-owned mapping key -> value. Nothing is persisted."""

    def __init__(self):
        self._vars: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._vars[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._vars.get(key)

    def delete(self, key: str) -> bool:
        if key not in self._vars:
            return False
        del self._vars[key]
        return True

    def list(self) -> list[tuple[str, str]]:
        # sorted by key so `vars` output is deterministic
        return sorted(self._vars.items())

    def __len__(self):
        return len(self._vars)

    def __contains__(self, key):
        return key in self._vars
