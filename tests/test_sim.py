import math
from datetime import datetime

import pytest

from clockturtle.geometry import pose_from_minute
from clockturtle.motion_controller import Twist
from clockturtle.sim import Simulation, TurtleSim, main


def fixed_clock(minute):
    return lambda: datetime(2024, 1, 1, 12, minute)


def test_straight_motion():
    turtle = TurtleSim(x=0.0, y=0.0, theta=0.0)
    pose = turtle.apply(Twist(linear_x=1.0), 2.0)
    assert pose.x == pytest.approx(2.0)
    assert pose.y == pytest.approx(0.0)
    assert pose.linear_velocity == 1.0


def test_pure_rotation_keeps_position():
    turtle = TurtleSim(x=1.0, y=2.0, theta=0.0)
    pose = turtle.apply(Twist(angular_z=1.0), 0.5)
    assert (pose.x, pose.y) == (1.0, 2.0)
    assert pose.theta == pytest.approx(0.5)


def test_heading_stays_normalized():
    turtle = TurtleSim(theta=3.0)
    pose = turtle.apply(Twist(angular_z=1.0), 1.0)
    assert -math.pi <= pose.theta <= math.pi
    assert math.cos(pose.theta) == pytest.approx(math.cos(4.0))
    assert math.sin(pose.theta) == pytest.approx(math.sin(4.0))


def test_step_rejects_non_positive_dt():
    sim = Simulation(clock=fixed_clock(15))
    with pytest.raises(ValueError):
        sim.step(0.0)


def test_turtle_follows_clock_pose_by_one_unit():
    sim = Simulation(clock=fixed_clock(15))
    start = (sim.turtle.x, sim.turtle.y)
    pose = None
    for _ in range(18):
        pose = sim.step(0.5)
    assert math.hypot(pose.x - start[0], pose.y - start[1]) == pytest.approx(1.0, abs=1e-6)
    assert pose.x == pytest.approx(start[0], abs=1e-6)
    assert pose.theta == pytest.approx(-math.pi / 2, abs=1e-6)


def test_turtle_stays_put_before_any_target():
    sim = Simulation(clock=fixed_clock(15))
    start = (sim.turtle.x, sim.turtle.y)
    for _ in range(10):
        pose = sim.step(0.5)
    assert (pose.x, pose.y) == start


def test_gui_pose_drives_turtle():
    sim = Simulation(clock=fixed_clock(15))
    start_x, start_y = sim.turtle.x, sim.turtle.y
    sim.manager.on_gui_cli_pose(pose_from_minute(0, 0.0))
    for _ in range(6):
        pose = sim.step(0.5)
    assert pose.x == pytest.approx(start_x + 1.0, abs=1e-6)
    assert pose.y == pytest.approx(start_y, abs=1e-6)


def test_main_prints_one_line_per_step(capsys):
    assert main(["--duration", "3", "--dt", "0.5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert all(line.startswith("t=") for line in lines)


def test_main_rejects_bad_dt():
    with pytest.raises(SystemExit):
        main(["--dt", "0"])