"""The mission service and its command-line interface."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import TextIO

from .driver import Driver
from .missions import CountMission, DistanceMission, Mission, SnapError, TimeMission

_ARITY = {
    "add_distance_mission": 5,
    "add_count_mission": 5,
    "add_time_mission": 5,
    "assign_mission": 2,
    "record_ride": 4,
    "show_missions_status": 1,
}


class Snap:
    """Keeps missions and drivers and answers commands about them."""

    def __init__(self) -> None:
        self._missions: dict[int, Mission] = {}
        self._drivers: dict[int, Driver] = {}

    def _add_mission(self, kind, mission_id, start_time, end_time, target, reward):
        if mission_id in self._missions:
            raise SnapError("DUPLICATE_MISSION_ID")
        if start_time >= end_time:
            raise SnapError("INVALID_ARGUMENTS")
        if reward <= 0 or target <= 0:
            raise SnapError("INVALID_ARGUMENTS")
        self._missions[mission_id] = kind(mission_id, start_time, end_time, reward, target)
        return ["OK"]

    def add_distance_mission(self, mission_id, start_time, end_time, target_distance, reward):
        """Create a mission reached by total distance ridden."""
        return self._add_mission(
            DistanceMission, mission_id, start_time, end_time, target_distance, reward
        )

    def add_count_mission(self, mission_id, start_time, end_time, target_number, reward):
        """Create a mission reached by number of rides."""
        return self._add_mission(
            CountMission, mission_id, start_time, end_time, target_number, reward
        )

    def add_time_mission(self, mission_id, start_time, end_time, target_time, reward):
        """Create a mission reached by total ride time."""
        return self._add_mission(TimeMission, mission_id, start_time, end_time, target_time, reward)

    def assign_mission(self, mission_id, driver_id):
        """Give a mission to a driver, registering the driver if new."""
        mission = self._missions.get(mission_id)
        if mission is None:
            raise SnapError("MISSION_NOT_FOUND")
        driver = self._drivers.setdefault(driver_id, Driver(driver_id))
        driver.add_mission(mission)
        return ["OK"]

    def record_ride(self, start_time, end_time, driver_id, distance):
        """Apply a ride to a driver's missions; unknown drivers are ignored."""
        driver = self._drivers.get(driver_id)
        if driver is None:
            return []
        return driver.record_ride(start_time, end_time, distance)

    def show_missions_status(self, driver_id):
        """Status of a driver's missions; unknown drivers are ignored."""
        driver = self._drivers.get(driver_id)
        if driver is None:
            return []
        return driver.show_missions()

    def execute(self, tokens: Sequence[str]) -> list[str]:
        """Run one command given as its name followed by its arguments."""
        if not tokens:
            return []
        name, *args = tokens
        arity = _ARITY.get(name)
        if arity is None:
            return []
        if len(args) != arity:
            raise ValueError(f"{name} takes {arity} arguments, got {len(args)}")
        values = [int(arg) for arg in args]
        try:
            return getattr(self, name)(*values)
        except SnapError as error:
            return [error.code]

    def run(self, stream: Iterable[str], out: TextIO) -> None:
        """Read commands from ``stream`` until it ends, writing replies to ``out``."""
        words = (word for line in stream for word in line.split())
        for word in words:
            arity = _ARITY.get(word)
            if arity is None:
                continue
            args = list(islice(words, arity))
            if len(args) < arity:
                break
            for line in self.execute([word, *args]):
                out.write(line + "\n")


def main(argv=None) -> int:
    """Read commands from standard input and answer them."""
    parser = argparse.ArgumentParser(
        prog="ridemissions", description="Track driver ride missions from commands on stdin."
    )
    parser.parse_args(argv)
    try:
        Snap().run(sys.stdin, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())