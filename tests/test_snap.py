import io
import sys

import pytest

from ridemissions.missions import SnapError
from ridemissions.snap import Snap, main


def test_add_missions_ok():
    snap = Snap()
    assert snap.add_distance_mission(1, 10, 100, 500, 5) == ["OK"]
    assert snap.add_count_mission(2, 10, 100, 3, 5) == ["OK"]
    assert snap.add_time_mission(3, 10, 100, 60, 5) == ["OK"]


def test_duplicate_mission_id_checked_first():
    snap = Snap()
    snap.add_count_mission(1, 10, 100, 3, 5)
    with pytest.raises(SnapError) as info:
        snap.add_time_mission(1, 100, 10, 0, 0)
    assert info.value.code == "DUPLICATE_MISSION_ID"


@pytest.mark.parametrize(
    "start,end,target,reward",
    [(100, 100, 3, 5), (100, 10, 3, 5), (10, 100, 0, 5), (10, 100, 3, 0), (10, 100, -1, 5)],
)
def test_invalid_mission_arguments(start, end, target, reward):
    with pytest.raises(SnapError) as info:
        Snap().add_count_mission(1, start, end, target, reward)
    assert info.value.code == "INVALID_ARGUMENTS"


def test_assign_unknown_mission():
    with pytest.raises(SnapError) as info:
        Snap().assign_mission(5, 1)
    assert info.value.code == "MISSION_NOT_FOUND"


def test_assign_twice_is_duplicate():
    snap = Snap()
    snap.add_count_mission(1, 10, 100, 3, 5)
    assert snap.assign_mission(1, 7) == ["OK"]
    with pytest.raises(SnapError) as info:
        snap.assign_mission(1, 7)
    assert info.value.code == "DUPLICATE_DRIVER_MISSION"


def test_unknown_driver_is_silent():
    snap = Snap()
    assert snap.record_ride(1, 2, 99, 10) == []
    assert snap.show_missions_status(99) == []


def test_execute_reports_errors_and_ignores_unknown():
    snap = Snap()
    assert snap.execute(["assign_mission", "1", "2"]) == ["MISSION_NOT_FOUND"]
    assert snap.execute(["dance", "1"]) == []
    assert snap.execute(["add_count_mission", "1", "10", "100", "2", "5"]) == ["OK"]
    with pytest.raises(ValueError):
        snap.execute(["assign_mission", "1"])


SCRIPT = """add_count_mission 1 10 100 2 5
assign_mission 1 7
record_ride 20 30 7 500
record_ride 40 50 7 500
show_missions_status 7
"""

EXPECTED = """OK
OK
completed missions for driver 7:
1 0 0
completed missions for driver 7:
mission: 1
start tiemstamp: 10
end timestamp: 50
reward: 5

2 0 0
missions status for driver 7:
mission: 1
start timestamp: 10
end timestamp: 50
reward: 5
status: completed
"""


def test_run_worked_example():
    out = io.StringIO()
    Snap().run(io.StringIO(SCRIPT), out)
    assert out.getvalue() == EXPECTED


def test_run_skips_noise_and_stops_at_truncated_command():
    out = io.StringIO()
    Snap().run(io.StringIO("hello add_count_mission 1 10 100 2 5\nassign_mission 1"), out)
    assert out.getvalue() == "OK\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SCRIPT))
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_rejects_non_numeric(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("assign_mission one 2\n"))
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("error:")