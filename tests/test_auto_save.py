import asyncio

from helper.auto_save import (
    DISABLED,
    ERROR,
    INSERTED,
    UNCHANGED,
    UPDATED,
    AutoSaver,
    DebounceScheduler,
    DraftUpsertCoordinator,
    has_changed,
    serialize_draft,
)
from helper.draft_schema import Draft, Keywords
from helper.settings_helper import get_quiet_period
from tests.fakes import FakeDraftStore

QUIET = 0.1


def edited(draft: Draft, **changes) -> Draft:
    return draft.model_copy(update=changes)


def test_serialization_ignores_construction_order():
    a = Draft(user_id="u", short_intro="hi", keywords=Keywords(primary=["x"]))
    b = Draft(keywords=Keywords(primary=["x"]), short_intro="hi", user_id="u")
    assert serialize_draft(a) == serialize_draft(b)
    assert not has_changed(serialize_draft(a), serialize_draft(b))


def test_nothing_confirmed_counts_as_changed():
    assert has_changed(serialize_draft(Draft(user_id="u")), None)


def test_quiet_period_from_env(monkeypatch):
    monkeypatch.setenv("AUTO_SAVE_QUIET_PERIOD_MS", "500")
    assert get_quiet_period() == 0.5
    monkeypatch.delenv("AUTO_SAVE_QUIET_PERIOD_MS")
    assert get_quiet_period() == 2.0


async def test_first_save_inserts_then_updates_same_row(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store)

    first = await coordinator.save(sample_draft)
    second = await coordinator.save(edited(sample_draft, content="More content."))

    assert first.status == INSERTED
    assert second.status == UPDATED
    assert first.draft_id == second.draft_id
    assert len(store.rows) == 1


async def test_unchanged_draft_is_not_written_again(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store)

    await coordinator.save(sample_draft)
    result = await coordinator.save(sample_draft.model_copy(deep=True))

    assert result.status == UNCHANGED
    assert len(store.calls) == 1


async def test_resumed_draft_is_not_rewritten(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store, last_confirmed=serialize_draft(sample_draft))

    result = await coordinator.save(sample_draft)

    assert result.status == UNCHANGED
    assert store.calls == []


async def test_failed_save_is_retried_on_next_settle(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store)
    store.fail_next = 1

    failed = await coordinator.save(sample_draft)
    assert failed.status == ERROR
    assert failed.error == "connection lost"
    assert coordinator.last_confirmed is None

    retried = await coordinator.save(sample_draft)
    assert retried.status == INSERTED
    assert len(store.calls) == 1


async def test_disabled_session_never_writes(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store, enabled=False)
    saver = AutoSaver(coordinator, QUIET)

    assert saver.update(sample_draft) is False
    assert not saver.scheduler.pending
    assert (await coordinator.save(sample_draft)).status == DISABLED
    await asyncio.sleep(QUIET * 1.5)
    assert store.calls == []


async def test_stored_record_reloads_to_the_same_draft(store, sample_draft):
    coordinator = DraftUpsertCoordinator(store)
    await coordinator.save(sample_draft)

    row = await store.get_draft(sample_draft.user_id)
    reloaded = Draft.model_validate(row)

    assert reloaded == sample_draft
    assert reloaded.headings.h3s[0].h2_index == 1


async def test_overlapping_saves_run_one_at_a_time(sample_draft):
    store = FakeDraftStore(delay=0.05)
    coordinator = DraftUpsertCoordinator(store)
    newer = edited(sample_draft, content="Newer content.")

    results = await asyncio.gather(coordinator.save(sample_draft), coordinator.save(newer))

    assert [r.status for r in results] == [INSERTED, UPDATED]
    assert store.max_active == 1
    assert store.rows["user-1"]["content"] == "Newer content."
    assert coordinator.last_confirmed == serialize_draft(newer)


async def test_burst_of_edits_saves_once_with_last_state(store, sample_draft):
    saver = AutoSaver(DraftUpsertCoordinator(store), QUIET)

    saver.update(edited(sample_draft, content="a"))
    await asyncio.sleep(0.01)
    saver.update(edited(sample_draft, content="ab"))
    await asyncio.sleep(0.01)
    saver.update(edited(sample_draft, content="abc"))
    await asyncio.sleep(QUIET * 2)
    await saver.scheduler.wait_in_flight()

    assert len(store.calls) == 1
    assert store.calls[0][1]["content"] == "abc"


async def test_each_edit_restarts_the_quiet_period(store, sample_draft):
    saver = AutoSaver(DraftUpsertCoordinator(store), QUIET)

    saver.update(sample_draft)
    await asyncio.sleep(QUIET * 0.6)
    saver.update(edited(sample_draft, content="later"))
    await asyncio.sleep(QUIET * 0.6)
    assert store.calls == []

    await asyncio.sleep(QUIET)
    await saver.scheduler.wait_in_flight()
    assert len(store.calls) == 1


async def test_close_drops_pending_save(store, sample_draft):
    saver = AutoSaver(DraftUpsertCoordinator(store), QUIET)

    saver.update(sample_draft)
    saver.close()
    await asyncio.sleep(QUIET * 2)

    assert not saver.scheduler.pending
    assert store.calls == []


async def test_flush_saves_immediately_and_reports(store, sample_draft):
    results = []

    async def on_result(result):
        results.append(result)

    saver = AutoSaver(DraftUpsertCoordinator(store), 10.0, on_result=on_result)
    assert await saver.flush() is None

    saver.update(sample_draft)
    result = await saver.flush()

    assert result.status == INSERTED
    assert result.to_dict() == {"status": INSERTED, "draft_id": 1, "error": None}
    assert results == [result]
    assert not saver.scheduler.pending


async def test_fired_action_is_not_cancelled_by_close():
    finished = []

    async def slow_action():
        await asyncio.sleep(0.05)
        finished.append(True)

    scheduler = DebounceScheduler(0.01, slow_action)
    scheduler.notify()
    await asyncio.sleep(0.03)
    scheduler.cancel()
    await scheduler.wait_in_flight()

    assert finished == [True]
