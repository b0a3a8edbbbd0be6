"""Proportional controller that drives the turtle to its target pose."""

from __future__ import annotations

import copy
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

from clockturtle.geometry import (
    Pose,
    Position,
    PoseStamped,
    normalize_angle,
    quaternion_from_rpy,
    rpy_from_quaternion,
)
from clockturtle.pose_manager import GetTargetPoseRequest, GetTargetPoseResponse

logger = logging.getLogger(__name__)


@dataclass
class TurtlePose:
    """Planar pose and velocities reported by the turtle."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    linear_velocity: float = 0.0
    angular_velocity: float = 0.0


@dataclass
class Twist:
    """Velocity command: forward speed and turn rate."""

    linear_x: float = 0.0
    angular_z: float = 0.0


@dataclass(frozen=True)
class ControllerParams:
    """Gains, thresholds and loop period of the controller."""

    kp_linear: float = 1.0
    kp_angular: float = 1.0
    distance_threshold: float = 0.5
    angle_threshold: float = 0.5
    control_loop_timer_period: float = 1.0


class MotionController:
    """Turns toward the target heading, then drives forward to the target."""

    def __init__(
        self,
        publish: Callable[[Twist], None],
        request_target: Callable[[GetTargetPoseRequest], None],
        params: ControllerParams | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.publish = publish
        self.request_target = request_target
        self.params = params if params is not None else ControllerParams()
        self._clock = clock if clock is not None else time.time
        self.target_pose = PoseStamped()
        self.current_pose = PoseStamped()
        self.prior_current_pose = PoseStamped()
        self.turtle_pose = TurtlePose()
        self.update_prior_current_pose = True
        self.updated_target_available = False
        logger.info("Motion Controller node has started.")

    def on_target_pose(self, msg: PoseStamped) -> None:
        """Take a newly published target pose."""
        self.target_pose = copy.deepcopy(msg)

    def on_turtle_pose(self, msg: TurtlePose) -> None:
        """Update the current pose from the turtle's report."""
        self.turtle_pose = copy.deepcopy(msg)
        self.current_pose = PoseStamped(
            pose=Pose(
                position=Position(msg.x, msg.y, 0.0),
                orientation=quaternion_from_rpy(0.0, 0.0, msg.theta),
            ),
            stamp=self._clock(),
            frame_id="map",
        )
        if self.update_prior_current_pose:
            self.prior_current_pose = copy.deepcopy(self.current_pose)
            logger.info(
                "Prior Current pose [x=%.2f, y=%.2f]",
                self.prior_current_pose.pose.position.x,
                self.prior_current_pose.pose.position.y,
            )
            self.update_prior_current_pose = False

    def on_target_response(self, response: GetTargetPoseResponse) -> None:
        """Handle the answer to a target request.

        A new target is taken relative to the pose the turtle had when it
        was requested; with no new target the turtle holds that pose.
        """
        self.updated_target_available = response.updated_target
        if self.updated_target_available:
            target = self.target_pose.pose.position
            prior = self.prior_current_pose.pose.position
            target.x += prior.x
            target.y += prior.y
            target.z += prior.z
        else:
            self.target_pose = copy.deepcopy(self.prior_current_pose)
        logger.info(
            "Target pose [x=%.2f, y=%.2f]",
            self.target_pose.pose.position.x,
            self.target_pose.pose.position.y,
        )

    def control_step(self) -> Twist:
        """Compute, publish and return one velocity command."""
        target = self.target_pose.pose
        current = self.current_pose.pose
        distance = math.hypot(
            target.position.x - current.position.x,
            target.position.y - current.position.y,
        )

        cmd = Twist()
        if distance > self.params.distance_threshold and self.updated_target_available:
            _, _, yaw_current = rpy_from_quaternion(current.orientation)
            _, _, yaw_target = rpy_from_quaternion(target.orientation)
            theta_error = normalize_angle(yaw_target - yaw_current)
            if abs(theta_error) > self.params.angle_threshold:
                cmd.angular_z = self.params.kp_angular * theta_error
            else:
                cmd.linear_x = self.params.kp_linear * distance
        else:
            logger.info("Target reached.")
            self.request_target(GetTargetPoseRequest(need_new_target=True))
            self.prior_current_pose = copy.deepcopy(self.current_pose)
        self.publish(cmd)
        return cmd