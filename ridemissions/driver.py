"""A driver and the missions assigned to them."""

from __future__ import annotations

from .missions import Mission, MissionProgress, SnapError


class Driver:
    """Holds a driver's missions, ordered by mission start time."""

    def __init__(self, driver_id: int) -> None:
        self.driver_id = driver_id
        self._assignments: list[tuple[Mission, MissionProgress]] = []

    def has_mission(self, mission_id: int) -> bool:
        """Whether a mission with this id is already assigned."""
        return any(m.mission_id == mission_id for m, _ in self._assignments)

    def add_mission(self, mission: Mission) -> None:
        """Assign a mission, keeping missions sorted by start time."""
        if self.has_mission(mission.mission_id):
            raise SnapError("DUPLICATE_DRIVER_MISSION")
        index = sum(
            1 for existing, _ in self._assignments if mission.start_time >= existing.start_time
        )
        self._assignments.insert(index, (mission, MissionProgress()))

    def show_missions(self) -> list[str]:
        """Status lines for every assigned mission."""
        if not self._assignments:
            raise SnapError("DRIVER_MISSION_NOT_FOUND")
        blocks = []
        for mission, progress in self._assignments:
            end = progress.end_time if progress.completed else -1
            status = "completed" if progress.completed else "ongoing"
            blocks.append(
                [
                    f"mission: {mission.mission_id}",
                    f"start timestamp: {mission.start_time}",
                    f"end timestamp: {end}",
                    f"reward: {mission.reward}",
                    f"status: {status}",
                ]
            )
        lines = [f"missions status for driver {self.driver_id}:"]
        for position, block in enumerate(blocks):
            if position:
                lines.append("")
            lines.extend(block)
        return lines

    def record_ride(self, start_time: int, end_time: int, distance: int) -> list[str]:
        """Apply a ride to every ongoing mission and report the outcome."""
        if end_time <= start_time:
            raise SnapError("INVALID_ARGUMENTS")
        lines = [f"completed missions for driver {self.driver_id}:"]
        for mission, progress in self._assignments:
            if progress.completed:
                continue
            if mission.check_complete(start_time, end_time, distance, progress):
                lines.extend(mission.record_ride_report(end_time))
            lines.append(f"{progress.count} {progress.distance} {progress.seconds}")
        return lines