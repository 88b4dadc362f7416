"""
Configuration for the block runtime.

Reads from a config dict, falling back to environment variables.
"""

import logging
import os
from typing import Any, Dict, Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

TRANSPORT_TYPES = ('mqtt', 'iot', 'recording')


class ConfigError(Exception):
    """Configuration is unusable"""
    pass


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


class TelloConfig:
    """Settings for transports, metrics and logging."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        config_dict = config_dict or {}

        self.transport = (config_dict.get('transport') or 'mqtt').lower()
        self.drone_id = config_dict.get('drone_id', 'tello-01')
        self.locale = config_dict.get('locale')

        # Local broker
        self.mqtt_broker = config_dict.get('mqtt_broker', 'localhost')
        try:
            self.mqtt_port = int(config_dict.get('mqtt_port', 1883))
        except (TypeError, ValueError):
            raise ConfigError(f"mqtt_port must be an integer: {config_dict.get('mqtt_port')!r}")
        self.mqtt_user = config_dict.get('mqtt_user')
        self.mqtt_pass = config_dict.get('mqtt_pass')

        # AWS IoT Core / CloudWatch
        self.aws_region = config_dict.get('aws_region', 'us-east-1')
        self.iot_endpoint = config_dict.get('iot_endpoint')
        self.cloudwatch_namespace = config_dict.get('cloudwatch_namespace')
        self.cloudwatch_enabled = _as_bool(config_dict.get('cloudwatch_enabled', True))

        self.log_level = config_dict.get('log_level', 'INFO')

        if self.transport not in TRANSPORT_TYPES:
            raise ConfigError(f"Unknown transport type: {self.transport}")

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None) -> 'TelloConfig':
        env = os.environ
        config_dict = {
            'transport': env.get('TELLO_TRANSPORT', 'mqtt'),
            'drone_id': env.get('DRONE_ID', 'tello-01'),
            'locale': env.get('TELLO_LOCALE'),
            'mqtt_broker': env.get('MQTT_HOST', 'localhost'),
            'mqtt_port': env.get('MQTT_PORT', '1883'),
            'mqtt_user': env.get('MQTT_USER'),
            'mqtt_pass': env.get('MQTT_PASS'),
            'aws_region': env.get('AWS_REGION', 'us-east-1'),
            'iot_endpoint': env.get('IOT_ENDPOINT'),
            'cloudwatch_namespace': env.get('CLOUDWATCH_NAMESPACE'),
            'cloudwatch_enabled': env.get('CLOUDWATCH_ENABLED', 'true'),
            'log_level': env.get('LOG_LEVEL', 'INFO'),
        }
        config_dict.update(overrides or {})
        return cls(config_dict)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
