"""Poses, quaternions and the clock-face geometry of the minute hand."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Position:
    """A point in 3-D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """An orientation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Pose:
    """A position together with an orientation."""

    position: Position = field(default_factory=Position)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class PoseStamped:
    """A pose with a time stamp (seconds) and a reference frame name."""

    pose: Pose = field(default_factory=Pose)
    stamp: float = 0.0
    frame_id: str = ""


def quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Build a quaternion from fixed-axis roll, pitch and yaw angles (radians)."""
    half_roll, half_pitch, half_yaw = roll * 0.5, pitch * 0.5, yaw * 0.5
    cr, sr = math.cos(half_roll), math.sin(half_roll)
    cp, sp = math.cos(half_pitch), math.sin(half_pitch)
    cy, sy = math.cos(half_yaw), math.sin(half_yaw)
    return Quaternion(
        x=sr * cp * cy - cr * sp * sy,
        y=cr * sp * cy + sr * cp * sy,
        z=cr * cp * sy - sr * sp * cy,
        w=cr * cp * cy + sr * sp * sy,
    )


def rpy_from_quaternion(q: Quaternion) -> tuple[float, float, float]:
    """Return (roll, pitch, yaw) of the rotation described by ``q``.

    Raises ValueError for a zero-length quaternion.
    """
    norm2 = q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w
    if norm2 == 0.0:
        raise ValueError("cannot take the orientation of a zero quaternion")
    s = 2.0 / norm2
    xs, ys, zs = q.x * s, q.y * s, q.z * s
    wx, wy, wz = q.w * xs, q.w * ys, q.w * zs
    xx, xy, xz = q.x * xs, q.x * ys, q.x * zs
    yy, yz, zz = q.y * ys, q.y * zs, q.z * zs

    m00, m01, m02 = 1.0 - (yy + zz), xy - wz, xz + wy
    m10 = xy + wz
    m20, m21, m22 = xz - wy, yz + wx, 1.0 - (xx + yy)

    if abs(m20) >= 1.0:
        yaw = 0.0
        if m20 < 0.0:
            pitch = math.pi / 2.0
            roll = math.atan2(m01, m02)
        else:
            pitch = -math.pi / 2.0
            roll = math.atan2(-m01, -m02)
        return roll, pitch, yaw

    pitch = -math.asin(m20)
    cos_pitch = math.cos(pitch)
    roll = math.atan2(m21 / cos_pitch, m22 / cos_pitch)
    yaw = math.atan2(m10 / cos_pitch, m00 / cos_pitch)
    return roll, pitch, yaw


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi] by whole turns."""
    if math.isinf(angle):
        raise ValueError("cannot normalize an infinite angle")
    while angle > math.pi:
        angle -= 2.0 * math.pi
    while angle < -math.pi:
        angle += 2.0 * math.pi
    return angle


def minute_angle(minute: float) -> float:
    """Angle of the minute hand in radians, turning clockwise from 2*pi at minute 0."""
    return (1.0 - minute / 60.0) * 2.0 * math.pi


def pose_from_minute(minute: float, stamp: float) -> PoseStamped:
    """Pose on the unit circle pointing the way the minute hand points."""
    angle = minute_angle(minute)
    return PoseStamped(
        pose=Pose(
            position=Position(math.cos(angle), math.sin(angle), 0.0),
            orientation=quaternion_from_rpy(0.0, 0.0, angle),
        ),
        stamp=stamp,
        frame_id="map",
    )