# ridemissions

A small command interpreter for managing missions given to ride-sharing drivers.
You define missions, assign them to drivers, and record rides. The interpreter
reports each driver's progress and announces when a mission is completed and
what reward it carries.

There are three kinds of mission:

- **distance**: complete once the total distance of rides in the mission window reaches the target.
- **count**: complete once the number of rides in the mission window reaches the target.
- **time**: complete once the total time (end minus start) of rides in the mission window reaches the target.

A ride counts toward a mission only if it starts no earlier than the mission's
start timestamp and ends no later than its end timestamp. A completed mission
takes no further rides into account.

## Installation

```
pip install .
```

## Usage

The `ridemissions` command reads commands from standard input until it ends
and writes the replies to standard output.

```
ridemissions < commands.txt
```

Input is read as whitespace-separated words, so a command may span lines.
Words that are not a command name are skipped. Arguments must be integers; if
one is not, the command prints an error on standard error and exits with
status 1. A command cut short by the end of input is ignored.

### Commands

```
add_distance_mission <mission_id> <start> <end> <target_distance> <reward>
add_count_mission    <mission_id> <start> <end> <target_rides>    <reward>
add_time_mission     <mission_id> <start> <end> <target_time>     <reward>
assign_mission       <mission_id> <driver_id>
record_ride          <start> <end> <driver_id> <distance>
show_missions_status <driver_id>
```

- Adding a mission prints `OK`. It fails with `DUPLICATE_MISSION_ID` if the id
  is taken, and with `INVALID_ARGUMENTS` if start is not before end or the
  target or reward is not positive.
- `assign_mission` prints `OK`, registering the driver on first use. It fails
  with `MISSION_NOT_FOUND` or `DUPLICATE_DRIVER_MISSION`. A driver's missions
  are kept in order of their start timestamps.
- `record_ride` prints `completed missions for driver <id>:`, then for every
  ongoing mission the driver's ride count, total distance and total time. A
  mission completed by this ride is announced just before its line. It fails
  with `INVALID_ARGUMENTS` if end is not after start.
- `show_missions_status` lists each mission's id, start timestamp, end
  timestamp (`-1` while ongoing), reward and status (`ongoing` or
  `completed`). It fails with `DRIVER_MISSION_NOT_FOUND` when the driver has
  no missions.
- `record_ride` and `show_missions_status` print nothing for a driver that has
  never been assigned a mission.

### Example

```
add_count_mission 1 100 500 2 30
assign_mission 1 7
record_ride 110 150 7 1000
record_ride 200 260 7 500
show_missions_status 7
```

prints

```
OK
OK
completed missions for driver 7:
1 0 0
completed missions for driver 7:
mission: 1
start tiemstamp: 100
end timestamp: 260
reward: 30

2 0 0
missions status for driver 7:
mission: 1
start timestamp: 100
end timestamp: 260
reward: 30
status: completed
```

## Library use

```python
from ridemissions.snap import Snap

snap = Snap()
snap.add_distance_mission(1, 0, 1000, 5000, 20)
snap.assign_mission(1, 42)
print(snap.record_ride(10, 100, 42, 6000))
print(snap.show_missions_status(42))
```

Each `Snap` method returns the reply as a list of lines. A rejected operation
raises `ridemissions.missions.SnapError`, whose `code` is the text the
command-line tool prints. `Snap.execute(tokens)` runs one command given as a
list of words and returns its lines, error codes included; `Snap.run(stream,
out)` runs every command read from a text stream.

The module `ridemissions.missions` holds the mission classes
(`DistanceMission`, `CountMission`, `TimeMission`) and `MissionProgress`;
`ridemissions.driver` holds `Driver`.

## Limitations

State lives only in memory: missions, drivers and progress are lost when the
program ends, and nothing is saved to or loaded from a file.

## Running the tests

```
pip install .[test]
pytest
```