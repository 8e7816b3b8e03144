from abc import ABCMeta, abstractmethod

from ecr_to_ecs_deployer.domain.deployment_notification import DeploymentNotification
from ecr_to_ecs_deployer.domain.notification_result import NotificationResult


class DeploymentNotifier(metaclass=ABCMeta):
    @abstractmethod
    def notify(self, notification: DeploymentNotification) -> NotificationResult:
        """Deliver a notification. Failures are reported in the result and never raised."""
        pass
