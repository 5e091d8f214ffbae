#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math

from robotstate_sdk import (
    JointLimitChecker,
    Pose,
    RobotConfiguration,
    joint_limits_from_config,
    load_config,
    setup_logging,
)


def main():
    cfg = load_config()
    setup_logging(cfg["logging"]["level"])

    home = RobotConfiguration.from_config()
    print("Home q:", home.q)
    print("Home pose quaternion [w, x, y, z]:", home.pose.quaternion())

    JointLimitChecker(joint_limits_from_config(cfg)).check(home)
    # No collision checker here; assume a free workspace
    home.is_collision_free = True
    print("Home valid:", home.is_valid)

    target = home.clone()
    target.q[0] = math.radians(30.0)
    target.pose = Pose.from_degrees(x=0.35, y=0.2, z=0.3, tz=30.0, ty=60.0)
    target.add_field("gripper_width", 0.04)
    print("Target R:\n", target.pose.rotation())
    print("Target T (Euler rates -> omega):\n", target.pose.euler_rate_to_angular_velocity_matrix())
    print("Home untouched:", home.q, home.has_field("gripper_width"))


if __name__ == "__main__":
    main()
