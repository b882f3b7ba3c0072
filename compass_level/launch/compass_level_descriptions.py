################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from typing import Optional

from launch.launch_description import LaunchDescription
from launch_ros.actions import Node


################################################################################
# ROS parameters
################################################################################


ROS_NAMESPACE: str = "oasis"

COMPASS_LEVEL_PACKAGE_NAME: str = "compass_level"


################################################################################
# Node descriptions
################################################################################


class CompassLevelDescriptions:
    #
    # Compass level
    #

    @staticmethod
    def add_compass_level(
        ld: LaunchDescription, host_id: str, params_file: Optional[str] = None
    ) -> None:
        parameters: list[dict[str, str]] = []
        if params_file:
            parameters.append({"params_file": params_file})

        compass_level_node: Node = Node(
            namespace=ROS_NAMESPACE,
            package=COMPASS_LEVEL_PACKAGE_NAME,
            executable="compass_level",
            name=f"compass_level_{host_id}",
            output="screen",
            remappings=[
                ("compass_level", f"{host_id}/compass_level"),
                ("imu", f"{host_id}/imu"),
                ("magnetic_field", f"{host_id}/magnetic_field"),
            ],
            parameters=parameters,
        )
        ld.add_action(compass_level_node)
