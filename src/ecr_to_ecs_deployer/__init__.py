from ecr_to_ecs_deployer.configuration import DeployerConfiguration
from ecr_to_ecs_deployer.domain.push_event import PushEvent
from ecr_to_ecs_deployer.domain.service_deployer import ServiceDeployer
from ecr_to_ecs_deployer.index import create_service_deployer, handler

__all__ = ["create_service_deployer", "handler", "DeployerConfiguration", "PushEvent", "ServiceDeployer"]
