from logging import Logger
from typing import Optional, Callable, TypeVar

from boto3 import Session
from botocore.config import Config
from botocore.exceptions import ConnectTimeoutError, ReadTimeoutError
from mypy_boto3_ecs.client import ECSClient

from ecr_to_ecs_deployer.domain.container_orchestrator import ContainerOrchestrator
from ecr_to_ecs_deployer.domain.orchestration_timeout_exception import OrchestrationTimeoutException
from ecr_to_ecs_deployer.domain.service_descriptor import ServiceDescriptor
from ecr_to_ecs_deployer.domain.task_definition import TaskDefinition

T = TypeVar('T')


class BotoEcsContainerOrchestrator(ContainerOrchestrator):
    def __init__(self, boto_session: Session, region: str, timeout_seconds: float, logger: Logger):
        self.__logger = logger
        self.__ecs_client: ECSClient = boto_session.client(
            'ecs',
            region_name=region,
            config=Config(
                connect_timeout=timeout_seconds,
                read_timeout=timeout_seconds,
                retries=dict(total_max_attempts=1)
            )
        )

    def find_service(self, cluster: str, service: str) -> Optional[ServiceDescriptor]:
        describe_services_response = self.__call(
            'DescribeServices',
            lambda: self.__ecs_client.describe_services(cluster=cluster, services=[service])
        )

        services = describe_services_response.get('services') or []

        if not services:
            self.__logger.info(f'DescribeServices failures: {describe_services_response.get("failures")}')
            return None

        return ServiceDescriptor(
            cluster=cluster,
            service=service,
            task_definition_arn=services[0]['taskDefinition']
        )

    def describe_task_definition(self, task_definition_arn: str) -> TaskDefinition:
        describe_task_definition_response = self.__call(
            'DescribeTaskDefinition',
            lambda: self.__ecs_client.describe_task_definition(taskDefinition=task_definition_arn)
        )

        return TaskDefinition(dict(describe_task_definition_response['taskDefinition']))

    def register_task_definition(self, task_definition: TaskDefinition) -> str:
        register_task_definition_response = self.__call(
            'RegisterTaskDefinition',
            lambda: self.__ecs_client.register_task_definition(**task_definition.registration_parameters())
        )

        return register_task_definition_response['taskDefinition']['taskDefinitionArn']

    def update_service(self, cluster: str, service: str, task_definition_arn: Optional[str] = None) -> None:
        update_parameters = dict(cluster=cluster, service=service, forceNewDeployment=True)

        if task_definition_arn is not None:
            update_parameters['taskDefinition'] = task_definition_arn

        self.__call('UpdateService', lambda: self.__ecs_client.update_service(**update_parameters))

    @staticmethod
    def __call(operation: str, request: Callable[[], T]) -> T:
        try:
            return request()
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            raise OrchestrationTimeoutException(operation) from e
