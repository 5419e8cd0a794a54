"""Cache invalidation for rendered admin and public views.

Views are cached under tags such as ``events_list`` or ``event_<id>``.
After a successful write, actions call ``invalidate`` for every affected
tag. Invalidation is fire and forget: listener failures are logged and
never reach the caller.

When ``CACHE_INVALIDATION_TOPIC_ARN`` is set, each tag is also published
to SNS so frontends can drop their cached pages.
"""

from __future__ import annotations

import os
from typing import Callable

from guide_admin.services.aws_clients import publish_event
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

InvalidationListener = Callable[[str], None]

_LISTENERS: list[InvalidationListener] = []


def list_tag(entity: str) -> str:
    """Tag for an entity's list view, e.g. ``events_list``."""
    if entity.endswith("y"):
        return f"{entity[:-1]}ies_list"
    return f"{entity}s_list"


def item_tag(entity: str, entity_id: object) -> str:
    """Tag for a single item view, e.g. ``event_<id>``."""
    return f"{entity}_{entity_id}"


def add_listener(listener: InvalidationListener) -> None:
    """Register a callable that receives every invalidated tag."""
    if listener not in _LISTENERS:
        _LISTENERS.append(listener)


def remove_listener(listener: InvalidationListener) -> None:
    if listener in _LISTENERS:
        _LISTENERS.remove(listener)


def clear_listeners() -> None:
    _LISTENERS.clear()


def invalidate(tag: str) -> None:
    """Invalidate one cache tag."""
    logger.info(f"Invalidating cache tag {tag}", extra={"tag": tag})
    for listener in list(_LISTENERS):
        try:
            listener(tag)
        except Exception:
            logger.exception(f"Cache invalidation listener failed for {tag}")

    topic_arn = os.getenv("CACHE_INVALIDATION_TOPIC_ARN")
    if topic_arn:
        _publish(topic_arn, tag)


def invalidate_many(*tags: str) -> None:
    for tag in tags:
        invalidate(tag)


def _publish(topic_arn: str, tag: str) -> None:
    try:
        publish_event(topic_arn, "cache.invalidate", {"tag": tag})
    except Exception as exc:
        logger.exception(f"Failed to publish cache invalidation to SNS: {exc}")
