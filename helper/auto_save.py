"""
Debounced auto-save of the blog wizard draft.

Three pieces work together:

* ``serialize_draft`` / ``has_changed`` decide whether the current draft
  differs from the last snapshot the store confirmed.
* ``DebounceScheduler`` coalesces bursts of edits into one action that runs
  after a quiet period; ``cancel()`` on teardown drops the pending action.
* ``DraftUpsertCoordinator`` owns the last confirmed snapshot and performs
  one upsert per settled change.

``AutoSaver`` wires them together for one wizard session.
"""
import asyncio
import json
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from helper.draft_schema import Draft
from helper.draft_store import DraftStore
from helper.exceptions import DraftStoreError
from helper.log_helper import get_logger
from helper.settings_helper import get_quiet_period

logger = get_logger("auto_save")

INSERTED = "inserted"
UPDATED = "updated"
UNCHANGED = "unchanged"
DISABLED = "disabled"
ERROR = "error"


def serialize_draft(draft: Draft) -> str:
    return json.dumps(draft.model_dump(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def has_changed(current: str, previous: Optional[str]) -> bool:
    # None means nothing was confirmed yet, which differs from every snapshot
    return previous is None or current != previous


@dataclass
class SaveResult:
    status: str
    draft_id: Optional[int] = None
    error: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.status in (INSERTED, UPDATED)

    def to_dict(self) -> dict:
        return {"status": self.status, "draft_id": self.draft_id, "error": self.error}


class DebounceScheduler:
    def __init__(self, quiet_period: float, action: Callable[[], Awaitable]):
        self.quiet_period = quiet_period
        self._action = action
        self._handle: Optional[asyncio.TimerHandle] = None
        self._in_flight = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify(self) -> None:
        """Restart the quiet period; the action runs once it elapses undisturbed."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self.quiet_period, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        task = asyncio.create_task(self._action())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def wait_in_flight(self) -> None:
        """Wait for actions that already fired; they are never cancelled."""
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight))


class DraftUpsertCoordinator:
    def __init__(self, store: DraftStore, enabled: bool = True, last_confirmed: Optional[str] = None):
        self.store = store
        self.enabled = enabled
        self.last_confirmed = last_confirmed
        self._lock = asyncio.Lock()

    async def save(self, draft: Draft) -> SaveResult:
        if not self.enabled:
            return SaveResult(DISABLED)

        serialized = serialize_draft(draft)
        # one save at a time per session so a slow call can't overwrite a newer snapshot
        async with self._lock:
            if not has_changed(serialized, self.last_confirmed):
                return SaveResult(UNCHANGED)
            try:
                row, created = await self.store.upsert_draft(draft.user_id, draft.to_record())
            except DraftStoreError as e:
                logger.error(f"Auto-save error for user {draft.user_id}: {e}")
                return SaveResult(ERROR, error=str(e))
            self.last_confirmed = serialized

        return SaveResult(INSERTED if created else UPDATED, draft_id=row.get("id"))


class AutoSaver:
    """Auto-save session for one open wizard."""

    def __init__(
        self,
        coordinator: DraftUpsertCoordinator,
        quiet_period: float = None,
        on_result: Callable[[SaveResult], Awaitable] = None,
    ):
        self.coordinator = coordinator
        self.scheduler = DebounceScheduler(
            quiet_period if quiet_period is not None else get_quiet_period(),
            self._settle,
        )
        self.on_result = on_result
        self._latest: Optional[Draft] = None

    @property
    def enabled(self) -> bool:
        return self.coordinator.enabled

    def update(self, draft: Draft) -> bool:
        """Record an edit. Returns False when auto-save is off for this session."""
        if not self.enabled:
            return False
        self._latest = draft
        self.scheduler.notify()
        return True

    async def flush(self) -> Optional[SaveResult]:
        """Save the latest edit now instead of waiting for the quiet period."""
        self.scheduler.cancel()
        if self._latest is None:
            return None
        return await self._settle()

    def close(self) -> None:
        self.scheduler.cancel()

    async def _settle(self) -> SaveResult:
        result = await self.coordinator.save(self._latest)
        logger.debug(f"Auto-save settled: {result.status}")
        if self.on_result is not None:
            await self.on_result(result)
        return result
