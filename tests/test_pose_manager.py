import pytest

from clockturtle.geometry import PoseStamped, pose_from_minute
from clockturtle.pose_manager import (
    GetTargetPoseRequest,
    GetTargetPoseResponse,
    PoseManager,
)


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def setup():
    published = []
    clock = FakeClock()
    manager = PoseManager(published.append, clock=clock, gui_timeout_seconds=30.0)
    return manager, published, clock


def test_no_updated_target_when_nothing_received(setup):
    manager, published, _ = setup
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert response == GetTargetPoseResponse(updated_target=False)
    assert published == []


def test_updated_target_after_clock_pose(setup):
    manager, published, _ = setup
    clock_pose = pose_from_minute(15, 1.0)
    manager.on_clock_pose(clock_pose)
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert response.updated_target is True
    assert published == [clock_pose]


def test_second_request_without_new_pose_is_not_updated(setup):
    manager, published, _ = setup
    manager.on_clock_pose(pose_from_minute(15, 1.0))
    manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert response.updated_target is False
    assert len(published) == 1


def test_request_without_need_does_nothing(setup):
    manager, published, _ = setup
    manager.on_clock_pose(pose_from_minute(15, 1.0))
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=False))
    assert response.updated_target is False
    assert published == []
    assert manager.updated_active_pose is True


def test_gui_pose_takes_precedence_over_clock(setup):
    manager, published, _ = setup
    gui_pose = pose_from_minute(0, 2.0)
    manager.on_gui_cli_pose(gui_pose)
    manager.on_clock_pose(pose_from_minute(30, 3.0))
    manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert published == [gui_pose]


def test_timeout_switches_back_to_clock_pose(setup):
    manager, published, clock = setup
    clock_pose = pose_from_minute(30, 3.0)
    manager.on_gui_cli_pose(pose_from_minute(0, 2.0))
    manager.on_clock_pose(clock_pose)
    clock.t = 31.0
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert response.updated_target is True
    assert published == [clock_pose]
    assert manager.use_gui_pose is False


def test_timeout_without_clock_pose_publishes_default(setup):
    manager, published, clock = setup
    clock.t = 30.5
    response = manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert response.updated_target is True
    assert published == [PoseStamped()]


def test_published_pose_is_independent_copy(setup):
    manager, published, _ = setup
    clock_pose = pose_from_minute(15, 1.0)
    manager.on_clock_pose(clock_pose)
    clock_pose.pose.position.x = 99.0
    manager.handle_get_target_pose(GetTargetPoseRequest(need_new_target=True))
    assert published[0].pose.position.x == pytest.approx(pose_from_minute(15, 1.0).pose.position.x)