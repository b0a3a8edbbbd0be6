"""Clock-driven target poses, a pose manager, a proportional controller and a simulated turtle."""

__version__ = "0.1.0"

__all__ = ["clock_pose", "geometry", "guicli_pose", "motion_controller", "pose_manager", "sim"]