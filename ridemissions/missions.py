"""Ride missions and the progress a driver makes towards them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class SnapError(Exception):
    """A rejected command, carrying the code reported to the user."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class MissionProgress:
    """What one driver has accumulated towards one mission."""

    distance: int = 0
    count: int = 0
    seconds: int = 0
    completed: bool = False
    end_time: int = 0


@dataclass(frozen=True)
class Mission(ABC):
    """A rewarded goal that must be reached within a time window."""

    mission_id: int
    start_time: int
    end_time: int
    reward: int
    target: int

    def covers(self, start_time: int, end_time: int) -> bool:
        """Whether a ride between the two timestamps lies inside the window."""
        return start_time >= self.start_time and end_time <= self.end_time

    def check_complete(
        self, start_time: int, end_time: int, distance: int, progress: MissionProgress
    ) -> bool:
        """Count a ride towards the mission; return True once it is reached."""
        if not self.covers(start_time, end_time):
            return False
        if self._advance(progress, start_time, end_time, distance) >= self.target:
            progress.end_time = end_time
            progress.completed = True
            return True
        return False

    def record_ride_report(self, end_time: int) -> list[str]:
        """Lines announcing that the mission was completed at ``end_time``."""
        return [
            f"mission: {self.mission_id}",
            f"start tiemstamp: {self.start_time}",
            f"end timestamp: {end_time}",
            f"reward: {self.reward}",
            "",
        ]

    @abstractmethod
    def _advance(
        self, progress: MissionProgress, start_time: int, end_time: int, distance: int
    ) -> int:
        """Add a ride to the progress and return the measured total."""


@dataclass(frozen=True)
class TimeMission(Mission):
    """Reached when the total ride time meets the target."""

    def _advance(self, progress, start_time, end_time, distance):
        progress.seconds += end_time - start_time
        return progress.seconds


@dataclass(frozen=True)
class DistanceMission(Mission):
    """Reached when the total distance meets the target."""

    def _advance(self, progress, start_time, end_time, distance):
        progress.distance += distance
        return progress.distance


@dataclass(frozen=True)
class CountMission(Mission):
    """Reached when the number of rides meets the target."""

    def _advance(self, progress, start_time, end_time, distance):
        progress.count += 1
        return progress.count