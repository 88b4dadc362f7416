"""
Runtime wiring - config in, ready extension out.
"""

import logging
from typing import Optional

from tello_blocks.config import ConfigError, TelloConfig, configure_logging
from tello_blocks.extension import TelloExtension
from tello_blocks.transport import (
    IoTCoreTransport, MQTTTransport, RecordingTransport, Transport, TransportError
)

logger = logging.getLogger(__name__)


def build_transport(config: TelloConfig) -> Transport:
    if config.transport == 'mqtt':
        return MQTTTransport(config)
    if config.transport == 'iot':
        try:
            return IoTCoreTransport(config)
        except TransportError as e:
            raise ConfigError(str(e))
    if config.transport == 'recording':
        return RecordingTransport()
    raise ConfigError(f"Unknown transport type: {config.transport}")


def build_extension(config: Optional[TelloConfig] = None) -> TelloExtension:
    """Extension wired to the configured transport. Reads env when no config is given."""
    if config is None:
        config = TelloConfig.from_env()
        configure_logging(config.log_level)

    transport = build_transport(config)
    logger.info(f"Tello blocks ready: transport={config.transport}, drone_id={config.drone_id}")
    return TelloExtension(transport, locale=config.locale)
