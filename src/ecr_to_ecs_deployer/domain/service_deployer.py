from datetime import datetime, timezone
from logging import Logger
from typing import Callable, Optional

from ecr_to_ecs_deployer.domain.container_orchestrator import ContainerOrchestrator
from ecr_to_ecs_deployer.domain.deployment_notification import DeploymentNotification
from ecr_to_ecs_deployer.domain.deployment_notifier import DeploymentNotifier
from ecr_to_ecs_deployer.domain.deployment_result import DeploymentResult, DeploymentOutcome
from ecr_to_ecs_deployer.domain.push_event import PushEvent
from ecr_to_ecs_deployer.domain.service_not_found_exception import ServiceNotFoundException


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ServiceDeployer:
    """Rolls an ECS service forward to a freshly pushed ECR image.

    Runs the tag filter, service lookup, optional task definition clone, forced
    redeployment and optional notification in that order. Skips are returned as
    results; orchestration failures propagate to the caller untouched.
    """

    def __init__(self, cluster: str, service: str, container_orchestrator: ContainerOrchestrator, logger: Logger,
                 notifier: Optional[DeploymentNotifier] = None, update_task_definition: bool = True,
                 process_only_deployable_tag: bool = True, deployable_tag: str = 'latest',
                 match_image_substring: bool = False, clock: Callable[[], datetime] = utc_now):
        self.__cluster = cluster
        self.__service = service
        self.__container_orchestrator = container_orchestrator
        self.__logger = logger
        self.__notifier = notifier
        self.__update_task_definition = update_task_definition
        self.__process_only_deployable_tag = process_only_deployable_tag
        self.__deployable_tag = deployable_tag
        self.__match_image_substring = match_image_substring
        self.__clock = clock

    def deploy(self, push_event: PushEvent) -> DeploymentResult:
        self.__logger.info(f'ECR push detected: {push_event.repository_name}:{push_event.image_tag}')

        if self.__process_only_deployable_tag and push_event.image_tag != self.__deployable_tag:
            self.__logger.info(f"Tag '{push_event.image_tag}' is not '{self.__deployable_tag}', skipping")
            return DeploymentResult(
                DeploymentOutcome.SKIPPED_TAG,
                f'Skipped deployment for non-{self.__deployable_tag} tag: {push_event.image_tag}'
            )

        service_descriptor = self.__container_orchestrator.find_service(self.__cluster, self.__service)

        if service_descriptor is None:
            raise ServiceNotFoundException(self.__cluster, self.__service)

        task_definition_arn = service_descriptor.task_definition_arn
        self.__logger.info(f'Current task definition: {task_definition_arn}')

        if self.__update_task_definition:
            new_task_definition_arn = self.__register_task_definition_for(push_event, task_definition_arn)

            if new_task_definition_arn is None:
                return DeploymentResult(
                    DeploymentOutcome.NO_MATCHING_CONTAINER,
                    f'No matching container found for {push_event.repository_name}'
                )

            task_definition_arn = new_task_definition_arn
        else:
            self.__logger.info('Task definition update disabled, redeploying current task definition')

        self.__logger.info(f'Updating service: {self.__service}')
        self.__container_orchestrator.update_service(
            self.__cluster,
            self.__service,
            task_definition_arn if self.__update_task_definition else None
        )
        self.__logger.info(f'Service updated: {self.__service}')

        if self.__notifier is not None:
            self.__notify(self.__notifier, push_event, task_definition_arn)

        return DeploymentResult(
            DeploymentOutcome.DEPLOYED,
            f'Successfully updated {self.__service} with {push_event.repository_name}:{push_event.image_tag}'
        )

    def __register_task_definition_for(self, push_event: PushEvent, current_task_definition_arn: str) -> Optional[str]:
        current_task_definition = self.__container_orchestrator.describe_task_definition(current_task_definition_arn)
        self.__logger.info(f'Cloning task definition: {current_task_definition.arn}')

        new_task_definition, image_updates = current_task_definition.sanitised_for_registration().with_container_image(
            push_event,
            self.__match_image_substring
        )

        if not image_updates:
            self.__logger.warning(f'No container to update for repository: {push_event.repository_name}')
            return None

        for image_update in image_updates:
            self.__logger.info(
                f'Updating container {image_update.container_name} image: '
                f'{image_update.old_image} -> {image_update.new_image}'
            )

        self.__logger.info('Registering new task definition')
        new_task_definition_arn = self.__container_orchestrator.register_task_definition(new_task_definition)
        self.__logger.info(f'Registered new task definition: {new_task_definition_arn}')

        return new_task_definition_arn

    def __notify(self, notifier: DeploymentNotifier, push_event: PushEvent, task_definition_arn: str) -> None:
        notification = DeploymentNotification(
            repository_name=push_event.repository_name,
            image_tag=push_event.image_tag,
            cluster=self.__cluster,
            service=self.__service,
            task_definition_arn=task_definition_arn,
            timestamp=self.__clock().isoformat()
        )

        try:
            notification_result = notifier.notify(notification)
        except Exception:
            self.__logger.exception('Deployment notification raised unexpectedly, discarding')
            return

        if not notification_result.delivered:
            self.__logger.error(
                f'Deployment notification failed ({notification_result.failure_kind}): {notification_result.detail}'
            )
