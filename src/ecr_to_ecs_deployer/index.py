import json
import os
from logging import getLogger, Logger
from typing import Dict, Any, Optional

import boto3
import requests
from aws_lambda_typing.context import Context

from ecr_to_ecs_deployer.configuration import DeployerConfiguration
from ecr_to_ecs_deployer.domain.push_event import PushEvent
from ecr_to_ecs_deployer.domain.service_deployer import ServiceDeployer
from ecr_to_ecs_deployer.infrastructure.boto_ecs_container_orchestrator import BotoEcsContainerOrchestrator
from ecr_to_ecs_deployer.infrastructure.webhook_deployment_notifier import WebhookDeploymentNotifier

logger = getLogger()

service_deployer: Optional[ServiceDeployer] = None


def create_service_deployer(configuration: DeployerConfiguration, deployer_logger: Logger) -> ServiceDeployer:
    notifier = None

    if configuration.webhook_url:
        notifier = WebhookDeploymentNotifier(
            configuration.webhook_url,
            configuration.webhook_timeout_seconds,
            requests.Session(),
            deployer_logger
        )

    return ServiceDeployer(
        configuration.cluster,
        configuration.service,
        BotoEcsContainerOrchestrator(
            boto3.Session(),
            configuration.region,
            configuration.aws_timeout_seconds,
            deployer_logger
        ),
        deployer_logger,
        notifier=notifier,
        update_task_definition=configuration.update_task_definition,
        process_only_deployable_tag=configuration.process_only_deployable_tag,
        deployable_tag=configuration.deployable_tag,
        match_image_substring=configuration.match_image_substring
    )


def get_service_deployer() -> ServiceDeployer:
    global service_deployer

    if service_deployer is None:
        configuration = DeployerConfiguration.from_environment(os.environ)
        logger.setLevel(configuration.log_level)
        service_deployer = create_service_deployer(configuration, logger)

    return service_deployer


def handler(event: Dict[str, Any], _: Context) -> Dict[str, Any]:
    logger.info('Received event: %s', json.dumps(event, default=str))

    try:
        push_event = PushEvent.from_event_bridge_event(event)
        return get_service_deployer().deploy(push_event).to_lambda_response()
    except Exception:
        logger.exception('Deployment failed')
        raise
