import re

import pytest

from gomato.ansi import time_to_ansi_art
from gomato.applog import close_logging, init_logging
from gomato.config import Settings
from gomato.task import TaskManager, TimeModel
from gomato.timer import Session, TickOutcome, format_remaining


@pytest.fixture
def log_path(tmp_path):
    path = init_logging(tmp_path / "logs")
    yield path
    close_logging()


def _settings():
    return Settings(pomodoro=25, short_break=5, long_break=15, cycle=4)


def _session(remaining, manager=None):
    return Session(
        settings=_settings(),
        task_manager=manager,
        time_model=TimeModel(timer_is_running=True, timer_remaining=remaining, is_work_session=True),
    )


def _tick_lines(path):
    return [line for line in path.read_text(encoding="utf-8").splitlines() if "[Tick] Timer ticked" in line]


def _remaining_in(line):
    match = re.search(r"remaining: (-?\d+)", line)
    return int(match.group(1)) if match else -1


def test_handle_tick_logs(log_path):
    session = _session(2, TaskManager(log_path.parent / "tasks.json"))
    session.tick()
    assert "[Tick] Timer ticked" in log_path.read_text(encoding="utf-8")


def test_timer_tick_frequency(log_path):
    session = _session(5)
    initial = session.time_model.timer_remaining
    session.tick()
    session.tick()
    lines = _tick_lines(log_path)
    assert len(lines) == 2
    assert session.time_model.timer_remaining == initial - 2
    assert "remaining: 4" in lines[0]
    assert "remaining: 3" in lines[1]


def test_tick_simulation_is_decreasing(log_path):
    session = _session(3)
    for _ in range(3):
        session.tick()
    assert session.time_model.timer_remaining >= 0
    values = [_remaining_in(line) for line in _tick_lines(log_path)]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_timer_no_duplicate_ticks(log_path):
    session = _session(3)
    outcomes = [session.tick() for _ in range(3)]
    lines = _tick_lines(log_path)
    assert len(lines) == 3
    assert "remaining: 2" in lines[0]
    assert "remaining: 1" in lines[1]
    assert "remaining: 0" in lines[2]
    values = [_remaining_in(line) for line in lines]
    assert len(set(values)) == 3
    # Reaching zero in a work session starts the short break.
    assert session.time_model.is_work_session is False
    assert session.time_model.timer_remaining == 5 * 60
    assert all(outcome is not None for outcome in outcomes)


def test_tick_status_message_normal_mode(log_path):
    session = _session(100)
    session.settings.time_display_mode = "normal"
    outcome = session.tick()
    assert outcome == TickOutcome("剩余时间: 01:39", True)


def test_tick_status_message_ansi_mode(log_path):
    session = _session(100)
    outcome = session.tick()
    assert outcome.message == "剩余时间: " + time_to_ansi_art("01:39")


def test_tick_when_paused_does_nothing(log_path):
    session = _session(10)
    session.time_model.timer_is_running = False
    assert session.tick() is None
    assert session.time_model.timer_remaining == 10
    assert _tick_lines(log_path) == []


def test_work_end_starts_short_break(log_path):
    session = _session(1)
    outcome = session.tick()
    assert session.cycle_count == 1
    assert session.time_model.is_work_session is False
    assert session.time_model.timer_is_running is True
    assert session.time_model.timer_remaining == 300
    assert outcome.message == "工作结束，开始休息！\n现在是休息时间！(第1/4次)"
    assert outcome.schedule_next is True


def test_last_work_of_cycle_starts_long_break(log_path):
    session = _session(1)
    session.cycle_count = 3
    outcome = session.tick()
    assert session.cycle_count == 0
    assert session.time_model.is_work_session is False
    assert session.time_model.timer_remaining == 900
    assert outcome.message == "本周期已完成，进入长休息！"
    assert "[Cycle] 达到cycle上限，进入长休息，重置cycle计数" in log_path.read_text(encoding="utf-8")


def test_break_end_starts_work(log_path):
    session = _session(1)
    session.time_model.is_work_session = False
    session.cycle_count = 2
    outcome = session.tick()
    assert session.time_model.is_work_session is True
    assert session.time_model.timer_is_running is True
    assert session.time_model.timer_remaining == 1500
    assert session.cycle_count == 2
    assert outcome.message == "休息结束，开始新一轮工作！"


def test_toggle(log_path):
    session = _session(10)
    session.time_model.timer_is_running = False
    assert session.toggle() is True
    assert session.time_model.timer_is_running is True
    assert session.toggle() is False
    assert session.time_model.timer_is_running is False


def test_reset_syncs_task(log_path, tmp_path):
    manager = TaskManager(tmp_path / "tasks.json")
    manager.add_item("write", "docs")
    session = _session(42, manager)
    session.time_model.is_work_session = False
    session.reset()
    assert session.time_model == TimeModel(
        timer_duration=0, timer_remaining=1500, timer_is_running=False, is_work_session=True
    )
    reloaded = TaskManager(tmp_path / "tasks.json")
    assert reloaded.tasks[0].timer.timer_remaining == 1500


def test_select_task_takes_timer_and_starts(log_path, tmp_path):
    manager = TaskManager(tmp_path / "tasks.json")
    manager.add_item("a", "")
    manager.add_item("b", "")
    manager.tasks[1].timer = TimeModel(timer_duration=60, timer_remaining=30, is_work_session=True)
    session = Session(settings=_settings(), task_manager=manager)
    model = session.select_task(1)
    assert session.current_task_index == 1
    assert model.timer_remaining == 30
    assert model.timer_is_running is True
    # The task keeps its own copy until synced.
    assert manager.tasks[1].timer.timer_is_running is False


def test_tick_persists_to_current_task(log_path, tmp_path):
    manager = TaskManager(tmp_path / "tasks.json")
    manager.add_item("a", "")
    manager.tasks[0].timer = TimeModel(timer_duration=60, timer_remaining=30, is_work_session=True)
    session = Session(settings=_settings(), task_manager=manager)
    session.select_task(0)
    session.tick()
    reloaded = TaskManager(tmp_path / "tasks.json")
    assert reloaded.tasks[0].timer.timer_remaining == 29
    assert reloaded.tasks[0].timer.timer_is_running is True


def test_sync_task_out_of_range(log_path, tmp_path):
    manager = TaskManager(tmp_path / "tasks.json")
    session = _session(10, manager)
    session.current_task_index = 5
    assert session.sync_task() is False
    assert not (tmp_path / "tasks.json").exists()


def test_format_remaining():
    assert format_remaining(1500, "normal") == "25:00"
    assert format_remaining(1500, "ansi") == time_to_ansi_art("25:00")