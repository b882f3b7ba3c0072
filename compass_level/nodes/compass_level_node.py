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

import rclpy.node
import rclpy.parameter
import rclpy.publisher
import rclpy.qos
import rclpy.subscription
from builtin_interfaces.msg import Time as TimeMsg
from geometry_msgs.msg import Vector3Stamped as Vector3StampedMsg
from sensor_msgs.msg import Imu as ImuMsg
from sensor_msgs.msg import MagneticField as MagneticFieldMsg

from compass_level.orientation.config.orientation_config import OrientationConfig
from compass_level.orientation.config.orientation_params import OrientationParams
from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.orientation_types import Vector3
from compass_level.orientation.sensor_hub import OrientationSensorHub
from compass_level.presentation.display_helpers import TiltZone
from compass_level.presentation.display_helpers import direction_label
from compass_level.presentation.display_helpers import tilt_zone_color


################################################################################
# ROS parameters
################################################################################


NODE_NAME: str = "compass_level"

# ROS topics
IMU_TOPIC: str = "imu"
MAG_TOPIC: str = "magnetic_field"
COMPASS_LEVEL_TOPIC: str = "compass_level"

# ROS parameters
PARAM_FRAME_ID: str = "frame_id"
PARAM_PARAMS_FILE: str = "params_file"

# Units: uT/T. Meaning: sensor_msgs/MagneticField reports tesla
MICROTESLA_PER_TESLA: float = 1.0e6

# Units: s. Meaning: minimum interval between repeated status logs
STATUS_LOG_PERIOD_S: float = 5.0


################################################################################
# ROS node
################################################################################


class CompassLevelNode(rclpy.node.Node):
    """
    Publishes compass heading and tilt fused from IMU and magnetometer topics.

    The node is the sensor source of its OrientationSensorHub: topic
    subscriptions are created when the hub starts and destroyed when it
    stops.

    Output message layout (geometry_msgs/Vector3Stamped, degrees):
      - vector.x: roll
      - vector.y: pitch
      - vector.z: heading, clockwise from magnetic north
    """

    def __init__(
        self,
        parameter_overrides: Optional[list[rclpy.parameter.Parameter]] = None,
    ) -> None:
        """
        Initialize resources.
        """
        super().__init__(NODE_NAME, parameter_overrides=parameter_overrides)

        defaults: OrientationParams = OrientationParams.defaults()

        self.declare_parameter(PARAM_FRAME_ID, "")
        self.declare_parameter(PARAM_PARAMS_FILE, "")
        for name, value in defaults.as_dict().items():
            self.declare_parameter(name, value)

        self._frame_id: str = str(self.get_parameter(PARAM_FRAME_ID).value)

        params: OrientationParams = self._load_params()
        self._level_threshold_deg: float = params.level_threshold_deg
        self._tilted_threshold_deg: float = params.tilted_threshold_deg

        self._qos_profile: rclpy.qos.QoSProfile = (
            rclpy.qos.QoSPresetProfiles.SENSOR_DATA.value
        )

        self._compass_level_pub: rclpy.publisher.Publisher = self.create_publisher(
            msg_type=Vector3StampedMsg,
            topic=COMPASS_LEVEL_TOPIC,
            qos_profile=self._qos_profile,
        )

        self._imu_sub: Optional[rclpy.subscription.Subscription] = None
        self._mag_sub: Optional[rclpy.subscription.Subscription] = None

        self._last_stamp: Optional[TimeMsg] = None
        self._last_header_frame: str = ""
        self._last_status_log_s: Optional[float] = None
        self._tilt_zone: Optional[TiltZone] = None

        self._hub: OrientationSensorHub = OrientationSensorHub(params, source=self)
        self._hub.add_listener(self._publish_output)
        self._hub.start()

        self.get_logger().info("Compass level initialized")

    def stop(self) -> None:
        self._hub.stop()

        self.get_logger().info("Compass level deinitialized")

        self.destroy_node()

    def register(self, hub: OrientationSensorHub, sampling_period_us: int) -> None:
        self.get_logger().debug(
            f"Subscribing to sensors (requested period {sampling_period_us} us)"
        )

        self._imu_sub = self.create_subscription(
            msg_type=ImuMsg,
            topic=IMU_TOPIC,
            callback=self._handle_imu,
            qos_profile=self._qos_profile,
        )
        self._mag_sub = self.create_subscription(
            msg_type=MagneticFieldMsg,
            topic=MAG_TOPIC,
            callback=self._handle_mag,
            qos_profile=self._qos_profile,
        )

    def unregister(self, hub: OrientationSensorHub) -> None:
        if self._imu_sub is not None:
            self.destroy_subscription(self._imu_sub)
            self._imu_sub = None
        if self._mag_sub is not None:
            self.destroy_subscription(self._mag_sub)
            self._mag_sub = None

    def _load_params(self) -> OrientationParams:
        params_file: str = str(self.get_parameter(PARAM_PARAMS_FILE).value)
        if params_file:
            config: OrientationConfig = OrientationConfig.from_yaml_file(params_file)
            self.get_logger().info(f"Loaded orientation parameters from {params_file}")
            return config.params

        values: dict[str, object] = {
            name: self.get_parameter(name).value
            for name in OrientationParams.defaults().as_dict()
        }
        return OrientationParams.from_dict(values)

    def _handle_imu(self, message: ImuMsg) -> None:
        self._last_stamp = message.header.stamp
        self._last_header_frame = message.header.frame_id

        self._hub.on_rotation_rate_sample(
            Vector3(
                x=message.angular_velocity.x,
                y=message.angular_velocity.y,
                z=message.angular_velocity.z,
            )
        )
        self._hub.on_gravity_sample(
            Vector3(
                x=message.linear_acceleration.x,
                y=message.linear_acceleration.y,
                z=message.linear_acceleration.z,
            )
        )

    def _handle_mag(self, message: MagneticFieldMsg) -> None:
        self._last_stamp = message.header.stamp
        self._last_header_frame = message.header.frame_id

        self._hub.on_magnetic_field_sample(
            Vector3(
                x=message.magnetic_field.x * MICROTESLA_PER_TESLA,
                y=message.magnetic_field.y * MICROTESLA_PER_TESLA,
                z=message.magnetic_field.z * MICROTESLA_PER_TESLA,
            )
        )

    def _publish_output(self, output: OrientationOutput) -> None:
        message: Vector3StampedMsg = Vector3StampedMsg()
        if self._last_stamp is not None:
            message.header.stamp = self._last_stamp
        message.header.frame_id = (
            self._frame_id if self._frame_id else self._last_header_frame
        )
        message.vector.x = output.roll
        message.vector.y = output.pitch
        message.vector.z = output.heading

        self._compass_level_pub.publish(message)

        self._tilt_zone = tilt_zone_color(
            output.roll,
            output.pitch,
            self._level_threshold_deg,
            self._tilted_threshold_deg,
        )

        self._log_status(output, self._tilt_zone)

    @property
    def tilt_zone(self) -> Optional[TiltZone]:
        """Level zone of the last published output, or None before any output"""
        return self._tilt_zone

    def _log_status(self, output: OrientationOutput, zone: TiltZone) -> None:
        now_s: float = self.get_clock().now().nanoseconds * 1.0e-9
        if (
            self._last_status_log_s is not None
            and (now_s - self._last_status_log_s) < STATUS_LOG_PERIOD_S
        ):
            return
        self._last_status_log_s = now_s

        self.get_logger().debug(
            f"Heading {output.heading:.1f} deg ({direction_label(output.heading)}), "
            f"roll {output.roll:.1f} deg, pitch {output.pitch:.1f} deg, {zone.value}"
        )
