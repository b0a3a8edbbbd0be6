"""A simulated turtle driven by the pose manager and the motion controller."""

from __future__ import annotations

import argparse
import logging
import math
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from clockturtle.clock_pose import ClockPoseIssuer
from clockturtle.geometry import normalize_angle
from clockturtle.motion_controller import (
    ControllerParams,
    MotionController,
    TurtlePose,
    Twist,
)
from clockturtle.pose_manager import GetTargetPoseRequest, GetTargetPoseResponse, PoseManager

logger = logging.getLogger(__name__)

_EPS = 1e-9


@dataclass
class TurtleSim:
    """A planar turtle integrating velocity commands."""

    x: float = 5.544445
    y: float = 5.544445
    theta: float = 0.0

    def apply(self, twist: Twist, dt: float) -> TurtlePose:
        """Move under ``twist`` for ``dt`` seconds and report the new pose."""
        self.theta = normalize_angle(self.theta + twist.angular_z * dt)
        self.x += math.cos(self.theta) * twist.linear_x * dt
        self.y += math.sin(self.theta) * twist.linear_x * dt
        return TurtlePose(
            x=self.x,
            y=self.y,
            theta=self.theta,
            linear_velocity=twist.linear_x,
            angular_velocity=twist.angular_z,
        )


class Simulation:
    """Runs clock pose issuer, pose manager, controller and turtle together.

    ``clock`` gives the wall-clock time whose minute the clock pose follows;
    the manager and controller run on simulated seconds.
    """

    def __init__(
        self,
        params: ControllerParams | None = None,
        gui_timeout_seconds: float = 30.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.params = params if params is not None else ControllerParams()
        self.time = 0.0
        self.turtle = TurtleSim()
        self.twist = Twist()
        self._pending: deque[GetTargetPoseResponse] = deque()
        self._clock_elapsed = 0.0
        self._control_elapsed = 0.0
        self.manager = PoseManager(
            self._deliver_target, clock=self._sim_time, gui_timeout_seconds=gui_timeout_seconds
        )
        self.controller = MotionController(
            self._set_twist, self._request_target, params=self.params, clock=self._sim_time
        )
        self.issuer = ClockPoseIssuer(self.manager.on_clock_pose, clock=clock)

    def _sim_time(self) -> float:
        return self.time

    def _deliver_target(self, msg) -> None:
        self.controller.on_target_pose(msg)

    def _set_twist(self, twist: Twist) -> None:
        self.twist = twist

    def _request_target(self, request: GetTargetPoseRequest) -> None:
        self._pending.append(self.manager.handle_get_target_pose(request))

    def step(self, dt: float) -> TurtlePose:
        """Advance the simulation by ``dt`` seconds and return the turtle's pose."""
        if dt <= 0:
            raise ValueError("time step must be positive")
        self.time += dt
        pose = self.turtle.apply(self.twist, dt)
        self.controller.on_turtle_pose(pose)

        self._clock_elapsed += dt
        if self._clock_elapsed + _EPS >= self.issuer.timer_period:
            self._clock_elapsed -= self.issuer.timer_period
            self.issuer.publish_clock_pose()

        self._control_elapsed += dt
        if self._control_elapsed + _EPS >= self.params.control_loop_timer_period:
            self._control_elapsed -= self.params.control_loop_timer_period
            self.controller.control_step()
            while self._pending:
                self.controller.on_target_response(self._pending.popleft())
        return pose


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and print the turtle's pose after every step."""
    parser = argparse.ArgumentParser(
        prog="clockturtle-sim",
        description="Simulate a turtle following the minute hand of the clock.",
    )
    parser.add_argument("--duration", type=float, default=60.0, help="simulated seconds")
    parser.add_argument("--dt", type=float, default=0.1, help="seconds per step")
    parser.add_argument("--kp-linear", type=float, default=1.0)
    parser.add_argument("--kp-angular", type=float, default=1.0)
    parser.add_argument("--distance-threshold", type=float, default=0.5)
    parser.add_argument("--angle-threshold", type=float, default=0.5)
    parser.add_argument("--control-period", type=float, default=1.0)
    parser.add_argument("--gui-timeout", type=float, default=30.0)
    args = parser.parse_args(argv)
    if args.dt <= 0:
        parser.error("--dt must be positive")
    if args.duration < 0:
        parser.error("--duration cannot be negative")
    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    params = ControllerParams(
        kp_linear=args.kp_linear,
        kp_angular=args.kp_angular,
        distance_threshold=args.distance_threshold,
        angle_threshold=args.angle_threshold,
        control_loop_timer_period=args.control_period,
    )
    sim = Simulation(params, args.gui_timeout)
    try:
        for _ in range(round(args.duration / args.dt)):
            pose = sim.step(args.dt)
            print(
                f"t={sim.time:.2f} x={pose.x:.4f} y={pose.y:.4f} theta={pose.theta:.4f}",
                flush=True,
            )
    except KeyboardInterrupt:
        pass
    return 0