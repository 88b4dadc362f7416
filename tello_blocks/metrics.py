"""CloudWatch counters for command forwarding."""

import logging
from datetime import datetime, timezone
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class MetricPublisher:
    """
    Publishes counters to CloudWatch when a namespace is configured.
    Silent no-op otherwise. Failures are logged, never raised.
    """

    def __init__(self, namespace: Optional[str], region: str = 'us-east-1',
                 enabled: bool = True, client=None):
        self.namespace = namespace
        self.enabled = bool(enabled and namespace)
        self.cloudwatch = client
        if self.enabled and self.cloudwatch is None:
            try:
                self.cloudwatch = boto3.Session(region_name=region).client('cloudwatch')
            except (BotoCoreError, ClientError) as e:
                logger.warning(f"CloudWatch client init failed: {e}")
                self.enabled = False

    def publish_metric(self, metric_name: str, value: float = 1, unit: str = 'Count') -> None:
        if not self.enabled:
            return

        try:
            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[{
                    'MetricName': metric_name,
                    'Value': value,
                    'Unit': unit,
                    'Timestamp': datetime.now(timezone.utc)
                }]
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"CloudWatch publish failed: {e}")
