"""SNS access for cross-process notifications.

One boto3 SNS client is kept per region for the life of the Lambda
container.
"""

from __future__ import annotations

import json
import os
from typing import Any, Mapping, Optional

import boto3

_SNS_CLIENTS: dict[Optional[str], Any] = {}


def get_sns_client(region_name: Optional[str] = None) -> Any:
    """Return the SNS client for a region, defaulting to ``AWS_REGION``."""
    region = region_name or os.getenv("AWS_REGION") or None
    client = _SNS_CLIENTS.get(region)
    if client is None:
        client = boto3.client("sns", region_name=region)
        _SNS_CLIENTS[region] = client
    return client


def clear_client_cache() -> None:
    """Forget cached clients so a patched ``boto3.client`` is picked up."""
    _SNS_CLIENTS.clear()


def publish_event(
    topic_arn: str,
    event_type: str,
    payload: Mapping[str, Any],
) -> None:
    """Publish a JSON message tagged with an ``event_type`` attribute.

    Subscribers filter on the attribute; the body repeats it next to the
    payload keys.
    """
    get_sns_client().publish(
        TopicArn=topic_arn,
        Message=json.dumps({"event_type": event_type, **payload}),
        MessageAttributes={
            "event_type": {"DataType": "String", "StringValue": event_type},
        },
    )
