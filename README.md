# clockturtle

`clockturtle` moves a turtle around so that it follows the minute hand of
a clock. A target pose comes either from the wall clock or from a minute
typed in by hand. A pose manager picks which of the two is active, and a
proportional motion controller turns and drives the turtle until it
reaches the target.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Three commands are installed. Each prints poses as lines of text on
standard output.

- `clockturtle-clock` prints the pose of the current minute hand once every
  timer period.
  - `--timer-period SECONDS` sets the period (default 6).
  - `--count N` stops after `N` poses; without it the command runs until
    interrupted.
- `clockturtle-guicli` prompts for a minute on the terminal and prints the
  matching pose. The leading number of the line is used and the rest is
  ignored; a line holding a single space uses the current minute of the
  wall clock instead. A line with no number is logged as a warning and
  skipped. The command ends at end of input.
- `clockturtle-sim` runs the whole chain in one process: clock poses, the
  pose manager, the motion controller and a simulated turtle. It prints
  the time and the turtle's `x`, `y` and `theta` after every step.
  - `--duration SECONDS` simulated time to run (default 60).
  - `--dt SECONDS` length of one step (default 0.1).
  - `--kp-linear`, `--kp-angular` controller gains (default 1.0 each).
  - `--distance-threshold`, `--angle-threshold` controller thresholds
    (default 0.5 each).
  - `--control-period SECONDS` period of the control loop (default 1.0).
  - `--gui-timeout SECONDS` how long a typed-in pose stays active
    (default 30).

## How a minute becomes a pose

The minute hand's angle is `(1 - minute / 60) * 2π` radians. The pose sits
on the unit circle at `(cos angle, sin angle)` in the `map` frame, facing
along that angle.

## Library use

- `clockturtle.geometry` holds the pose types (`Position`, `Quaternion`,
  `Pose`, `PoseStamped`) and the helpers `quaternion_from_rpy`,
  `rpy_from_quaternion`, `normalize_angle`, `minute_angle` and
  `pose_from_minute`.
- `clockturtle.clock_pose.ClockPoseIssuer` builds the pose for the current
  minute with `publish_clock_pose()`; `clockturtle.guicli_pose.GuiCliPoseIssuer`
  does the same for a line of input with `publish_from_input(text)`, using
  `parse_minute`. Both hand each pose to a `publish` callable and take an
  optional `clock` callable returning a `datetime`.
- `clockturtle.pose_manager.PoseManager` keeps the latest clock and
  typed-in poses (`on_clock_pose`, `on_gui_cli_pose`). A typed-in pose wins
  until no new one has arrived for `gui_timeout_seconds` (30 by default);
  after that it falls back to the clock pose. `handle_get_target_pose`
  answers a `GetTargetPoseRequest` with a `GetTargetPoseResponse` saying
  whether a new target was published.
- `clockturtle.motion_controller.MotionController` takes target poses
  (`on_target_pose`), turtle reports (`on_turtle_pose`) and answers to its
  target requests (`on_target_response`). A new target is taken relative to
  the pose the turtle held when it asked. `control_step()` turns toward the
  target heading while the heading error is above the angle threshold and
  otherwise drives forward in proportion to the distance, emitting a
  `Twist`; once within the distance threshold it asks for a new target.
  Gains, thresholds and the loop period live in `ControllerParams`.
- `clockturtle.sim.Simulation` wires all of the above to a `TurtleSim` and
  advances it with `step(dt)`.

```python
from clockturtle.geometry import minute_angle, normalize_angle

angle = minute_angle(15)          # three quarters of a turn, in radians
heading = normalize_angle(angle)  # the same direction, within [-π, π]
```

## What it does not do

The commands do not talk to each other or to a real robot: there is no
message bus or network transport. `clockturtle-clock` and
`clockturtle-guicli` only print poses, and the turtle exists only inside
`clockturtle-sim`, which takes its targets from the clock alone and draws
nothing on screen.