import pytest

from timmy.timer import Timer


def test_positive_target_starts_running():
    timer = Timer(1.0)
    assert timer.running
    assert timer.current_time == 0.0


def test_zero_target_is_stopped():
    timer = Timer(0.0)
    assert not timer.running


def test_negative_target_is_clamped():
    timer = Timer(-3.0)
    assert timer.target_time == 0.0
    assert not timer.running


def test_update_below_target_accumulates():
    timer = Timer(1.0)
    timer.update(0.25)
    assert timer.current_time == pytest.approx(0.25)
    assert not timer.completed_this_frame
    assert timer.running


def test_non_looping_completion_stops_at_target():
    timer = Timer(1.0)
    timer.update(2.0)
    assert timer.completed_this_frame
    assert not timer.running
    assert timer.current_time == 1.0
    assert timer.progress == 1.0


def test_completed_flag_clears_on_next_update():
    timer = Timer(1.0)
    timer.update(1.0)
    assert timer.completed_this_frame
    timer.update(0.1)
    assert not timer.completed_this_frame


def test_looping_wraps_around():
    timer = Timer(1.0, looping=True)
    timer.update(1.5)
    assert timer.completed_this_frame
    assert timer.running
    assert timer.current_time == pytest.approx(0.5)


def test_stopped_timer_does_not_advance():
    timer = Timer(1.0)
    timer.stop()
    timer.update(0.5)
    assert timer.current_time == 0.0
    assert not timer.running


def test_reset_with_new_target_restarts():
    timer = Timer(1.0)
    timer.update(2.0)
    timer.reset(4.0)
    assert timer.target_time == 4.0
    assert timer.running
    assert timer.current_time == 0.0


def test_reset_without_target_keeps_target():
    timer = Timer(2.0)
    timer.update(1.0)
    timer.reset()
    assert timer.target_time == 2.0
    assert timer.current_time == 0.0
    assert timer.running


def test_reset_to_zero_stops():
    timer = Timer(2.0)
    timer.reset(0.0)
    assert not timer.running


def test_setting_smaller_target_clamps_current():
    timer = Timer(2.0)
    timer.update(1.5)
    timer.target_time = 1.0
    assert timer.current_time == 1.0


def test_progress_of_zero_target_is_full():
    assert Timer().progress == 1.0


def test_progress_stays_in_unit_range():
    timer = Timer(1.0, looping=True)
    for _ in range(20):
        timer.update(0.3)
        assert 0.0 <= timer.progress <= 1.0