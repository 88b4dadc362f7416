"""
Transports - where command strings leave the process.

The dispatcher only relies on connect() and send(command). Everything
about links, topics, retries and acknowledgements lives here.
"""

import logging
from typing import List, Optional

import boto3
import paho.mqtt.client as mqtt
from botocore.exceptions import BotoCoreError, ClientError

from tello_blocks.config import TelloConfig
from tello_blocks.envelope import wrap_command
from tello_blocks.metrics import MetricPublisher

logger = logging.getLogger(__name__)

# Puts the Tello into SDK mode; must precede any other verb
SDK_MODE_COMMAND = 'command'

COMMAND_TOPIC = "drone/{drone_id}/cmd"


class TransportError(Exception):
    """Failed to connect or publish"""
    pass


class Transport:
    """Interface consumed by the dispatcher."""

    def connect(self) -> None:
        raise NotImplementedError()

    def send(self, command: str) -> None:
        raise NotImplementedError()


class RecordingTransport(Transport):
    """Keeps everything in memory. Used for dry runs and tests."""

    def __init__(self):
        self.connect_count = 0
        self.sent: List[str] = []

    def connect(self) -> None:
        self.connect_count += 1
        logger.debug(f"Recorded connect #{self.connect_count}")

    def send(self, command: str) -> None:
        self.sent.append(command)
        logger.debug(f"Recorded command: {command}")


class _EnvelopeTransport(Transport):
    """Shared envelope handling for the networked transports."""

    def __init__(self, config: TelloConfig, metrics: Optional[MetricPublisher] = None):
        self.config = config
        self.topic = COMMAND_TOPIC.format(drone_id=config.drone_id)
        if metrics is None:
            metrics = MetricPublisher(
                config.cloudwatch_namespace,
                region=config.aws_region,
                enabled=config.cloudwatch_enabled
            )
        self.metrics = metrics

    def _publish(self, payload: str) -> None:
        raise NotImplementedError()

    def send(self, command: str) -> None:
        """
        Publish one command.

        Does NOT:
        - Retry beyond basic publish
        - Wait for ACK
        - Track state
        """
        payload = wrap_command(command, self.config.drone_id).to_json()
        try:
            self._publish(payload)
        except TransportError:
            self.metrics.publish_metric('CommandForwardFailed', 1)
            raise
        self.metrics.publish_metric('CommandForwarded', 1)
        logger.debug(f"Published to {self.topic}: {command}")


class MQTTTransport(_EnvelopeTransport):
    """
    Local broker transport (paho-mqtt).

    connect() is idempotent: the broker link is opened once and the network
    loop thread keeps it alive.
    """

    def __init__(self, config: TelloConfig, metrics: Optional[MetricPublisher] = None):
        super().__init__(config, metrics)
        self.client = None
        self.mqtt_connected = False

    def on_connect(self, client, userdata, flags, reason_code, properties=None):
        if reason_code == 0:
            self.mqtt_connected = True
            logger.info(f"Connected to broker at {self.config.mqtt_broker}:{self.config.mqtt_port}")
        else:
            self.mqtt_connected = False
            logger.error(f"Broker connection failed: {reason_code}")

    def on_disconnect(self, client, userdata, flags, reason_code, properties=None):
        self.mqtt_connected = False
        if reason_code != 0:
            logger.warning(f"Unexpected disconnect from broker: {reason_code}")

    def connect(self) -> None:
        if self.client is not None:
            logger.debug("Broker link already open")
        else:
            client = mqtt.Client(
                mqtt.CallbackAPIVersion.VERSION2,
                client_id=f"tello-blocks-{self.config.drone_id}"
            )
            client.on_connect = self.on_connect
            client.on_disconnect = self.on_disconnect

            if self.config.mqtt_user:
                client.username_pw_set(self.config.mqtt_user, self.config.mqtt_pass)

            logger.info(f"Connecting to broker at {self.config.mqtt_broker}:{self.config.mqtt_port}")
            try:
                client.connect(self.config.mqtt_broker, self.config.mqtt_port, keepalive=60)
            except OSError as e:
                raise TransportError(f"Broker connect failed: {e}")
            client.loop_start()
            self.client = client

        self.send(SDK_MODE_COMMAND)

    def _publish(self, payload: str) -> None:
        if self.client is None:
            raise TransportError("Cannot publish: not connected to broker")

        result = self.client.publish(self.topic, payload, qos=1)
        if result.rc != mqtt.MQTT_ERR_SUCCESS:
            raise TransportError(f"MQTT publish failed: {result.rc}")

    def close(self) -> None:
        if self.client is None:
            return
        self.client.disconnect()
        self.client.loop_stop()
        self.client = None
        self.mqtt_connected = False


class IoTCoreTransport(_EnvelopeTransport):
    """
    AWS IoT Core transport (boto3 iot-data).
    Connectionless: each send is one HTTPS publish.
    """

    def __init__(self, config: TelloConfig, metrics: Optional[MetricPublisher] = None):
        super().__init__(config, metrics)
        if not config.iot_endpoint:
            raise TransportError("iot_endpoint is required for IoT Core transport")
        self.client = None

    def _get_client(self):
        if self.client is None:
            self.client = boto3.client(
                'iot-data',
                region_name=self.config.aws_region,
                endpoint_url=f'https://{self.config.iot_endpoint}'
            )
        return self.client

    def connect(self) -> None:
        logger.info(f"Using IoT Core endpoint {self.config.iot_endpoint}")
        self._get_client()
        self.send(SDK_MODE_COMMAND)

    def _publish(self, payload: str) -> None:
        try:
            self._get_client().publish(
                topic=self.topic,
                qos=1,
                payload=payload.encode('utf-8')
            )
        except (BotoCoreError, ClientError) as e:
            raise TransportError(f"IoT publish failed: {e}")
