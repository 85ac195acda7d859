"""Caller allow-list for the extraction endpoint."""
from __future__ import annotations
from collections.abc import Iterable


class AllowList:
    def __init__(self, user_ids: Iterable[str]) -> None:
        self._user_ids = frozenset(u.strip() for u in user_ids if u and u.strip())

    def is_allowed(self, user_id: str | None) -> bool:
        if not user_id or not user_id.strip():
            return False
        return user_id.strip() in self._user_ids

    def __len__(self) -> int:
        return len(self._user_ids)
