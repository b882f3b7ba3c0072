################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

import os
import socket

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription

from compass_level.launch.compass_level_descriptions import (
    COMPASS_LEVEL_PACKAGE_NAME,
)
from compass_level.launch.compass_level_descriptions import CompassLevelDescriptions


################################################################################
# System parameters
################################################################################


# Get the hostname
HOSTNAME: str = socket.gethostname().replace("-", "_")

PARAMS_FILE: str = os.path.join(
    get_package_share_directory(COMPASS_LEVEL_PACKAGE_NAME),
    "config",
    "compass_level.yaml",
)


################################################################################
# Node definitions
################################################################################


def generate_launch_description() -> LaunchDescription:
    ld: LaunchDescription = LaunchDescription()

    CompassLevelDescriptions.add_compass_level(ld, HOSTNAME, PARAMS_FILE)

    return ld
