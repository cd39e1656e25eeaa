import asyncio
from typing import Any, Dict, List, Optional, Tuple

from helper.draft_store import DraftStore
from helper.exceptions import DraftStoreError


class FakeDraftStore(DraftStore):
    """In-memory draft store that records every write."""

    def __init__(self, delay: float = 0.0):
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_next = 0
        self.delay = delay
        self.active = 0
        self.max_active = 0
        self._next_id = 1

    async def get_draft(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self.rows.get(user_id)

    async def upsert_draft(self, user_id: str, record: Dict[str, Any]):
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.fail_next:
                self.fail_next -= 1
                raise DraftStoreError("connection lost")
            self.calls.append((user_id, record))
            created = user_id not in self.rows
            if created:
                self.rows[user_id] = {"id": self._next_id, "user_id": user_id}
                self._next_id += 1
            self.rows[user_id].update(record)
            return dict(self.rows[user_id]), created
        finally:
            self.active -= 1

    async def delete_draft(self, user_id: str) -> bool:
        return self.rows.pop(user_id, None) is not None

