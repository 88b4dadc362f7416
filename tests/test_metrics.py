from unittest import mock

from botocore.exceptions import ClientError

from tello_blocks.metrics import MetricPublisher


def test_disabled_without_namespace():
    cloudwatch = mock.Mock()
    publisher = MetricPublisher(None, client=cloudwatch)
    publisher.publish_metric('CommandForwarded')
    assert not publisher.enabled
    cloudwatch.put_metric_data.assert_not_called()


def test_disabled_by_flag():
    cloudwatch = mock.Mock()
    MetricPublisher('Tello/Blocks', enabled=False, client=cloudwatch).publish_metric('X')
    cloudwatch.put_metric_data.assert_not_called()


def test_publishes_counter():
    cloudwatch = mock.Mock()
    MetricPublisher('Tello/Blocks', client=cloudwatch).publish_metric('CommandForwarded', 2)
    kwargs = cloudwatch.put_metric_data.call_args.kwargs
    assert kwargs["Namespace"] == 'Tello/Blocks'
    datum = kwargs["MetricData"][0]
    assert datum["MetricName"] == 'CommandForwarded'
    assert datum["Value"] == 2
    assert datum["Unit"] == 'Count'


def test_publish_failure_is_logged(caplog):
    cloudwatch = mock.Mock()
    cloudwatch.put_metric_data.side_effect = ClientError(
        {"Error": {"Code": "Throttling", "Message": "slow down"}}, "PutMetricData")
    MetricPublisher('Tello/Blocks', client=cloudwatch).publish_metric('CommandForwarded')
    assert "CloudWatch publish failed" in caplog.text


def test_creates_client_from_session():
    with mock.patch("tello_blocks.metrics.boto3.Session") as session:
        publisher = MetricPublisher('Tello/Blocks', region='eu-west-1')
    session.assert_called_once_with(region_name='eu-west-1')
    assert publisher.cloudwatch is session.return_value.client.return_value
