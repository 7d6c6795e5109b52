from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import boto3
from fastapi import BackgroundTasks

from ..core.config import Settings
from ..models import WithdrawalEvent


logger = logging.getLogger(__name__)


class WithdrawalNotifier(Protocol):
    def publish(self, event: WithdrawalEvent) -> None: ...


class SnsNotifier:
    """Publishes withdrawal events to a fixed SNS topic.

    Delivery is fire-and-forget: one attempt per event, no retry. Any failure
    (credentials, network, serialization) is logged and swallowed.
    """

    def __init__(self, client: Any, topic_arn: str) -> None:
        self.client = client
        self.topic_arn = topic_arn

    def publish(self, event: WithdrawalEvent) -> None:
        try:
            response = self.client.publish(TopicArn=self.topic_arn, Message=event.to_json())
        except Exception as exc:
            logger.warning(
                "Failed to publish SNS event: %s",
                exc,
                extra={"account_id": event.account_id, "status": event.status.value},
            )
            return
        logger.debug(
            "withdrawal.event.published",
            extra={
                "account_id": event.account_id,
                "status": event.status.value,
                "message_id": response.get("MessageId"),
            },
        )


class LoggingNotifier:
    """Stands in for SNS when notifications are disabled."""

    def publish(self, event: WithdrawalEvent) -> None:
        logger.info("withdrawal.event", extra={"event": event.to_json()})


def create_sns_client(settings: Settings) -> Any:
    return boto3.client(
        "sns",
        region_name=settings.aws_region,
        endpoint_url=settings.sns_endpoint_url,
    )


def build_notifier(settings: Settings, client: Optional[Any] = None) -> WithdrawalNotifier:
    if not settings.notifications_enabled:
        return LoggingNotifier()
    return SnsNotifier(client or create_sns_client(settings), settings.sns_topic_arn)


class BackgroundEventDispatcher:
    """Hands events to the notifier through FastAPI background tasks.

    Tasks run after the response has been produced, so the notifier never
    delays or alters what the caller receives.
    """

    def __init__(self, background_tasks: BackgroundTasks, notifier: WithdrawalNotifier) -> None:
        self.background_tasks = background_tasks
        self.notifier = notifier

    def dispatch(self, event: WithdrawalEvent) -> None:
        self.background_tasks.add_task(self.notifier.publish, event)
