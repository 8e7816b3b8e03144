import json
from logging import Logger

import requests
from requests import Session

from ecr_to_ecs_deployer.domain.deployment_notification import DeploymentNotification
from ecr_to_ecs_deployer.domain.deployment_notifier import DeploymentNotifier
from ecr_to_ecs_deployer.domain.notification_result import NotificationResult


class WebhookDeploymentNotifier(DeploymentNotifier):
    def __init__(self, webhook_url: str, timeout_seconds: float, http_session: Session, logger: Logger):
        self.__webhook_url = webhook_url
        self.__timeout_seconds = timeout_seconds
        self.__http_session = http_session
        self.__logger = logger

    def notify(self, notification: DeploymentNotification) -> NotificationResult:
        self.__logger.info(f'Sending deployment notification for {notification.task_definition_arn}')

        try:
            response = self.__http_session.post(
                self.__webhook_url,
                data=json.dumps(notification.to_webhook_payload()),
                headers={'Content-Type': 'application/json'},
                timeout=self.__timeout_seconds
            )
        except requests.Timeout as e:
            return NotificationResult.failure('timeout', str(e))
        except requests.RequestException as e:
            return NotificationResult.failure('connection_error', str(e))

        self.__logger.info(f'Notification webhook status code: {response.status_code}')
        self.__logger.info(f'Notification webhook response: {response.text}')

        if not response.ok:
            return NotificationResult.failure('http_error', response.text, status_code=response.status_code)

        return NotificationResult.success(response.status_code)
