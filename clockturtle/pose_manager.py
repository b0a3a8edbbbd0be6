"""Chooses the target pose between the typed-in pose and the clock pose."""

from __future__ import annotations

import copy
import logging
import time
from dataclasses import dataclass
from typing import Callable

from clockturtle.geometry import PoseStamped

logger = logging.getLogger(__name__)


@dataclass
class GetTargetPoseRequest:
    """Asks the pose manager whether a new target is ready."""

    need_new_target: bool = False


@dataclass
class GetTargetPoseResponse:
    """Tells whether a new target pose was published."""

    updated_target: bool = False


class PoseManager:
    """Keeps the active target pose and hands it out on request.

    A pose typed in by the user takes precedence over the clock pose
    until no typed pose has arrived for ``gui_timeout_seconds``.
    """

    def __init__(
        self,
        publish: Callable[[PoseStamped], None],
        clock: Callable[[], float] | None = None,
        gui_timeout_seconds: float = 30.0,
    ) -> None:
        self.publish = publish
        self._clock = clock if clock is not None else time.monotonic
        self.gui_timeout_seconds = float(gui_timeout_seconds)
        self.clock_pose = PoseStamped()
        self.active_pose = PoseStamped()
        self.last_gui_pose_time = self._clock()
        self.use_gui_pose = False
        self.updated_active_pose = False
        logger.info("Pose Manager Node has started.")

    def handle_get_target_pose(self, request: GetTargetPoseRequest) -> GetTargetPoseResponse:
        """Publish the active pose if it changed since the last request."""
        response = GetTargetPoseResponse()
        if not request.need_new_target:
            return response

        logger.info("Received new target pose request.")
        elapsed = self._clock() - self.last_gui_pose_time
        logger.info("Time difference since last GUI update: %.2f", elapsed)

        if elapsed > self.gui_timeout_seconds:
            logger.warning("Switching to clock pose due to GUI timeout")
            self.use_gui_pose = False
            self.active_pose = copy.deepcopy(self.clock_pose)
            self.updated_active_pose = True

        if not self.updated_active_pose:
            logger.info("Sorry! No new target pose yet.")
            return response

        response.updated_target = True
        self._publish_active_pose()
        logger.info("Published active target pose via service.")
        return response

    def on_gui_cli_pose(self, msg: PoseStamped) -> None:
        """Make a typed-in pose the active one."""
        self.last_gui_pose_time = self._clock()
        self.active_pose = copy.deepcopy(msg)
        self.updated_active_pose = True
        self.use_gui_pose = True

    def on_clock_pose(self, msg: PoseStamped) -> None:
        """Record the clock pose; it becomes active unless a typed pose is in use."""
        self.clock_pose = copy.deepcopy(msg)
        if not self.use_gui_pose:
            self.active_pose = copy.deepcopy(msg)
            self.updated_active_pose = True

    def _publish_active_pose(self) -> None:
        msg = copy.deepcopy(self.active_pose)
        logger.info(
            "Active pose [x=%.2f, y=%.2f]",
            msg.pose.position.x,
            msg.pose.position.y,
        )
        self.publish(msg)
        self.updated_active_pose = False