import math

import numpy as np
import pytest

from robotstate_sdk.api.errors import ValidationError
from robotstate_sdk.api.pose import Pose
from robotstate_sdk.kinematics import quat_to_matrix


def _random_poses(n=50, seed=0):
    rng = np.random.default_rng(seed)
    for _ in range(n):
        yield Pose(
            *rng.uniform(-1.0, 1.0, 3),
            tz=rng.uniform(-math.pi, math.pi),
            ty=rng.uniform(-math.pi / 2, math.pi / 2),
            tx=rng.uniform(-math.pi, math.pi),
        )


def test_defaults_are_zero():
    p = Pose()
    assert np.array_equal(p.position(), np.zeros(3))
    assert np.array_equal(p.euler_angles(), np.zeros(3))
    assert np.allclose(p.rotation(), np.eye(3))


def test_positional_and_keyword_construction():
    p = Pose(1.0, 2.0, 3.0, 0.1, 0.2, 0.3)
    assert p == Pose(x=1.0, y=2.0, z=3.0, tz=0.1, ty=0.2, tx=0.3)
    assert p == Pose.from_radians(1.0, 2.0, 3.0, 0.1, 0.2, 0.3)


def test_euler_angles_returns_angles_not_position():
    p = Pose(1.0, 2.0, 3.0, 0.1, 0.2, 0.3)
    assert np.allclose(p.euler_angles(), [0.1, 0.2, 0.3])
    assert np.allclose(p.position(), [1.0, 2.0, 3.0])


@pytest.mark.parametrize("name, bound", [("tz", math.pi), ("ty", math.pi / 2), ("tx", math.pi)])
def test_angle_bounds_inclusive(name, bound):
    assert getattr(Pose(**{name: bound}), name) == bound
    assert getattr(Pose(**{name: -bound}), name) == -bound


@pytest.mark.parametrize("name, bound", [("tz", math.pi), ("ty", math.pi / 2), ("tx", math.pi)])
def test_angle_out_of_range_fails(name, bound):
    with pytest.raises(ValidationError):
        Pose(**{name: bound + 1e-9})
    with pytest.raises(ValidationError):
        Pose(**{name: -bound - 1e-9})


def test_assignment_is_validated():
    p = Pose()
    p.ty = 0.5
    assert p.ty == 0.5
    with pytest.raises(ValidationError):
        p.ty = math.pi / 2 + 1e-6
    assert p.ty == 0.5
    with pytest.raises(ValidationError):
        p.tz = float("nan")


def test_non_numeric_fields_rejected():
    with pytest.raises(ValidationError):
        Pose(x="1.0")
    with pytest.raises(ValidationError):
        Pose(tz=None)
    p = Pose()
    with pytest.raises(ValidationError):
        p.y = [1.0]


def test_from_degrees():
    p = Pose.from_degrees(1.0, tz=90.0, ty=-45.0, tx=180.0)
    assert p.x == 1.0
    assert np.allclose(p.euler_angles(), [math.pi / 2, -math.pi / 4, math.pi])
    assert Pose.from_degrees(ty=90.0).ty <= math.pi / 2
    assert Pose.from_degrees(tz=-180.0).tz >= -math.pi


def test_from_degrees_range_is_checked_in_degrees():
    with pytest.raises(ValidationError):
        Pose.from_degrees(tz=180.5)
    with pytest.raises(ValidationError):
        Pose.from_degrees(ty=-90.01)


def test_axis_rotations():
    p = Pose(tz=math.pi / 2, ty=math.pi / 2, tx=math.pi / 2)
    assert np.allclose(p.rotation_z() @ [1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    assert np.allclose(p.rotation_y() @ [0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
    assert np.allclose(p.rotation_x() @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0])


def test_rotation_is_zyx_product_and_proper():
    for p in _random_poses():
        R = p.rotation()
        assert np.array_equal(R, p.rotation_z() @ p.rotation_y() @ p.rotation_x())
        assert np.allclose(R.T @ R, np.eye(3), atol=1e-12)
        assert math.isclose(np.linalg.det(R), 1.0, abs_tol=1e-12)


def test_quaternion_matches_rotation():
    for p in _random_poses():
        q = p.quaternion()
        assert q.shape == (4,)
        assert math.isclose(np.linalg.norm(q), 1.0, abs_tol=1e-12)
        assert np.allclose(quat_to_matrix(q), p.rotation(), atol=1e-9)


def test_quaternion_is_scalar_first():
    q = Pose(tz=math.pi / 2).quaternion()
    assert np.allclose(np.abs(q), [math.sqrt(0.5), 0.0, 0.0, math.sqrt(0.5)])


def test_euler_rate_matrix_columns():
    for p in _random_poses(seed=1):
        T = p.euler_rate_to_angular_velocity_matrix()
        assert T.shape == (3, 3)
        assert np.array_equal(T[:, 0], [0.0, 0.0, 1.0])
        assert np.allclose(T[:, 1], p.rotation_z() @ [0.0, 1.0, 0.0])
        assert np.allclose(T[:, 2], p.rotation_z() @ p.rotation_y() @ [1.0, 0.0, 0.0])


def test_angular_velocity_pure_yaw_rate():
    p = Pose(tz=0.3, ty=-0.2, tx=1.0)
    assert np.allclose(p.angular_velocity([2.0, 0.0, 0.0]), [0.0, 0.0, 2.0])
    with pytest.raises(ValueError):
        p.angular_velocity([1.0, 2.0])


def test_transform():
    p = Pose(0.1, -0.2, 0.3, 0.4, 0.5, 0.6)
    T = p.transform()
    assert np.allclose(T[:3, :3], p.rotation())
    assert np.allclose(T[:3, 3], p.position())
    assert np.array_equal(T[3], [0.0, 0.0, 0.0, 1.0])


def test_rotation_uses_zyx_frame_helper():
    from robotstate_sdk.kinematics import euler_zyx_to_matrix

    p = Pose(tz=-1.1, ty=0.4, tx=2.7)
    assert np.array_equal(p.rotation(), euler_zyx_to_matrix(p.tz, p.ty, p.tx))
