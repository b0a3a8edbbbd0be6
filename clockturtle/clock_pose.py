"""Publishes a target pose that follows the minute hand of the wall clock."""

from __future__ import annotations

import argparse
import logging
import time
from datetime import datetime
from typing import Callable

from clockturtle.geometry import PoseStamped, minute_angle, pose_from_minute

logger = logging.getLogger(__name__)


def current_minute(now: datetime) -> float:
    """The minute of the hour of a local time, as a float."""
    return float(now.minute)


class ClockPoseIssuer:
    """Builds and publishes the clock pose each time it is triggered."""

    def __init__(
        self,
        publish: Callable[[PoseStamped], None],
        timer_period: float = 6.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if timer_period < 0:
            raise ValueError("timer period cannot be negative")
        self.publish = publish
        self.timer_period = float(timer_period)
        self._clock = clock if clock is not None else datetime.now
        logger.info("Clock Pose Node has started.")

    def publish_clock_pose(self) -> PoseStamped:
        """Publish the pose of the current minute and return it."""
        now = self._clock()
        minute = current_minute(now)
        msg = pose_from_minute(minute, stamp=now.timestamp())
        self.publish(msg)
        logger.info(
            "Published clock pose at minute %.2f: [x=%.2f, y=%.2f, angle=%.2f radians]",
            minute,
            msg.pose.position.x,
            msg.pose.position.y,
            minute_angle(minute),
        )
        return msg


def _format(msg: PoseStamped) -> str:
    p, q = msg.pose.position, msg.pose.orientation
    return (
        f"{msg.frame_id} {msg.stamp:.3f} "
        f"x={p.x:.6f} y={p.y:.6f} z={p.z:.6f} "
        f"q=({q.x:.6f}, {q.y:.6f}, {q.z:.6f}, {q.w:.6f})"
    )


def main(argv: list[str] | None = None) -> int:
    """Publish the clock pose to standard output every timer period."""
    parser = argparse.ArgumentParser(
        prog="clock-pose-issuer",
        description="Publish the minute-hand pose of the local clock.",
    )
    parser.add_argument("--timer-period", type=float, default=6.0, help="seconds between poses")
    parser.add_argument("--count", type=int, default=None, help="stop after this many poses")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        issuer = ClockPoseIssuer(lambda msg: print(_format(msg), flush=True), args.timer_period)
    except ValueError as exc:
        parser.error(str(exc))

    published = 0
    try:
        while args.count is None or published < args.count:
            time.sleep(issuer.timer_period)
            issuer.publish_clock_pose()
            published += 1
    except KeyboardInterrupt:
        pass
    return 0