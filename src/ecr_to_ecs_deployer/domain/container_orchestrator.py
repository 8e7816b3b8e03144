from abc import ABCMeta, abstractmethod
from typing import Optional

from ecr_to_ecs_deployer.domain.service_descriptor import ServiceDescriptor
from ecr_to_ecs_deployer.domain.task_definition import TaskDefinition


class ContainerOrchestrator(metaclass=ABCMeta):
    @abstractmethod
    def find_service(self, cluster: str, service: str) -> Optional[ServiceDescriptor]:
        pass

    @abstractmethod
    def describe_task_definition(self, task_definition_arn: str) -> TaskDefinition:
        pass

    @abstractmethod
    def register_task_definition(self, task_definition: TaskDefinition) -> str:
        pass

    @abstractmethod
    def update_service(self, cluster: str, service: str, task_definition_arn: Optional[str] = None) -> None:
        pass
