import pytest

from storysave.events import EventBus, EventType, LoadSceneMode, SavePointLoaded, SceneLoaded
from storysave.narrative import SavePointDescriptor, SceneSavePoints
from storysave.resolver import ResumeResolver
from storysave.scheduler import LoadScheduler, PendingAction, PendingKind


@pytest.fixture()
def scene(flowchart):
    return SceneSavePoints([
        SavePointDescriptor("start", "Main", 0, flowchart, is_start_point=True),
        SavePointDescriptor("chapter2", "Chapter2", 3, flowchart),
    ])


@pytest.fixture()
def slot_loads():
    return []


@pytest.fixture()
def scheduler(scene, slot_loads):
    def load_slot(slot):
        slot_loads.append(slot)
        return True

    return LoadScheduler(ResumeResolver(scene), load_slot)


def test_idle_tick_is_noop(scheduler, flowchart):
    assert scheduler.tick() is None
    assert flowchart.executions == []


def test_normal_scene_load_resumes_at_start_next_tick(scheduler, flowchart):
    scheduler.on_scene_loaded("level1", LoadSceneMode.NORMAL)
    # Nothing happens until the tick
    assert flowchart.executions == []
    assert scheduler.pending == PendingAction(PendingKind.SCENE_START)

    ran = scheduler.tick()
    assert ran.kind == PendingKind.SCENE_START
    assert flowchart.executions == [("Main", 0)]
    assert scheduler.pending.kind == PendingKind.IDLE

    # Runs exactly once
    assert scheduler.tick() is None
    assert flowchart.executions == [("Main", 0)]


def test_additive_scene_load_is_ignored(scheduler, flowchart):
    scheduler.on_scene_loaded("overlay", LoadSceneMode.ADDITIVE)
    assert scheduler.pending.kind == PendingKind.IDLE
    assert scheduler.tick() is None
    assert flowchart.executions == []


@pytest.mark.parametrize("signal_first", [False, True])
def test_save_point_signal_overrides_scene_start(scheduler, flowchart, signal_first):
    if signal_first:
        scheduler.on_save_point_loaded("chapter2")
        scheduler.on_scene_loaded("level2")
    else:
        scheduler.on_scene_loaded("level2")
        scheduler.on_save_point_loaded("chapter2")

    assert scheduler.pending == PendingAction(PendingKind.HISTORY_KEY, "chapter2")
    scheduler.tick()
    assert flowchart.executions == [("Chapter2", 4)]


def test_last_save_point_signal_wins(scheduler):
    scheduler.on_save_point_loaded("a")
    scheduler.on_save_point_loaded("b")
    assert scheduler.pending.key == "b"


def test_request_load_runs_slot_loader_on_tick(scheduler, slot_loads, flowchart):
    scheduler.request_load("slot1")
    assert slot_loads == []
    scheduler.on_scene_loaded("level1")
    # A pending load is not replaced by a scene start
    assert scheduler.pending == PendingAction(PendingKind.LOAD_SLOT, "slot1")

    scheduler.tick()
    assert slot_loads == ["slot1"]
    assert flowchart.executions == []


def test_action_queued_while_running_is_kept_for_next_tick(scene, flowchart):
    holder = {}

    def load_slot(slot):
        holder["scheduler"].on_save_point_loaded("chapter2")
        return True

    scheduler = LoadScheduler(ResumeResolver(scene), load_slot)
    holder["scheduler"] = scheduler

    scheduler.request_load("slot1")
    scheduler.tick()
    assert scheduler.pending == PendingAction(PendingKind.HISTORY_KEY, "chapter2")
    scheduler.tick()
    assert flowchart.executions == [("Chapter2", 4)]


def test_attach_routes_bus_signals(scheduler, flowchart):
    bus = EventBus()
    scheduler.attach(bus)

    bus.publish(EventType.SCENE_LOADED, SceneLoaded("level2"))
    bus.publish(EventType.SAVE_POINT_LOADED, SavePointLoaded("chapter2"))
    scheduler.tick()
    assert flowchart.executions == [("Chapter2", 4)]

    scheduler.detach(bus)
    bus.publish(EventType.SCENE_LOADED, SceneLoaded("level3"))
    assert scheduler.pending.kind == PendingKind.IDLE
