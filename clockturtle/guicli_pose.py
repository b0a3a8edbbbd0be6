"""Publishes a target pose for a minute typed in on the command line."""

from __future__ import annotations

import argparse
import logging
import math
import re
from datetime import datetime
from typing import Callable

from clockturtle.geometry import PoseStamped, minute_angle, pose_from_minute

logger = logging.getLogger(__name__)

PROMPT = "Enter minute hand from [1, 60] (or press <space> and Enter to use clock pose): "

_NUMBER = re.compile(
    r"""[\ \t\n\v\f\r]*
    (?P<num>[+-]?(?:
        0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
      | [iI][nN][fF](?:[iI][nN][iI][tT][yY])?
      | [nN][aA][nN]
    ))""",
    re.VERBOSE,
)


def parse_minute(text: str, now: datetime) -> float:
    """Minute given by a line of input.

    A single space selects the minute of ``now``; otherwise the leading
    number of the text is used and anything after it is ignored.
    Raises ValueError when the text starts with no number or one out of range.
    """
    if text == " ":
        return float(now.minute)
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"no number in input {text!r}")
    number_text = match.group("num")
    unsigned = number_text.lstrip("+-")
    try:
        if unsigned[:2].lower() == "0x":
            value = float.fromhex(number_text)
        else:
            value = float(number_text)
    except OverflowError as exc:
        raise ValueError(f"number out of range: {number_text!r}") from exc
    if math.isinf(value) and not unsigned.lower().startswith("inf"):
        raise ValueError(f"number out of range: {number_text!r}")
    return value


class GuiCliPoseIssuer:
    """Turns lines of user input into published minute-hand poses."""

    def __init__(
        self,
        publish: Callable[[PoseStamped], None],
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.publish = publish
        self._clock = clock if clock is not None else datetime.now
        logger.info("Gui/Cli Pose Node has started.")

    def publish_from_input(self, text: str) -> PoseStamped | None:
        """Publish the pose for one line of input; return it, or None if unreadable."""
        now = self._clock()
        try:
            minute = parse_minute(text, now)
        except ValueError as exc:
            logger.warning("Caught error in: %s", exc)
            return None
        msg = pose_from_minute(minute, stamp=now.timestamp())
        self.publish(msg)
        logger.info(
            "Published gui pose for input minute %.2f: [x=%.2f, y=%.2f, angle=%.2f radians]",
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
    """Prompt for minutes on standard input and print the resulting poses."""
    parser = argparse.ArgumentParser(
        prog="guicli-pose-issuer",
        description="Publish the minute-hand pose for minutes typed in.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    issuer = GuiCliPoseIssuer(lambda msg: print(_format(msg), flush=True))
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                break
            issuer.publish_from_input(line)
    except KeyboardInterrupt:
        pass
    return 0