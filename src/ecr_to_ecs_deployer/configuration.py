from dataclasses import dataclass
from typing import Mapping, Optional

from ecr_to_ecs_deployer.missing_configuration_exception import MissingConfigurationException

DEFAULT_REGION = 'ap-northeast-1'


def _flag(environment: Mapping[str, str], name: str, default: bool) -> bool:
    value = environment.get(name)

    if value is None:
        return default

    return value.lower() == 'true'


def _required(environment: Mapping[str, str], name: str) -> str:
    value = environment.get(name)

    if not value:
        raise MissingConfigurationException(name)

    return value


@dataclass(frozen=True)
class DeployerConfiguration:
    cluster: str
    service: str
    region: str = DEFAULT_REGION
    webhook_url: Optional[str] = None
    update_task_definition: bool = True
    process_only_deployable_tag: bool = True
    deployable_tag: str = 'latest'
    match_image_substring: bool = False
    aws_timeout_seconds: float = 10
    webhook_timeout_seconds: float = 5
    log_level: str = 'INFO'

    @classmethod
    def from_environment(cls, environment: Mapping[str, str]) -> 'DeployerConfiguration':
        return cls(
            cluster=_required(environment, 'ECS_CLUSTER'),
            service=_required(environment, 'ECS_SERVICE'),
            region=environment.get('AWS_REGION') or DEFAULT_REGION,
            webhook_url=environment.get('SLACK_WEBHOOK_URL') or None,
            update_task_definition=_flag(environment, 'UPDATE_TASK_DEFINITION', True),
            process_only_deployable_tag=_flag(environment, 'PROCESS_ONLY_LATEST', True),
            deployable_tag=environment.get('DEPLOYABLE_TAG') or 'latest',
            match_image_substring=_flag(environment, 'MATCH_IMAGE_SUBSTRING', False),
            aws_timeout_seconds=float(environment.get('AWS_TIMEOUT_SECONDS') or 10),
            webhook_timeout_seconds=float(environment.get('WEBHOOK_TIMEOUT_SECONDS') or 5),
            log_level=(environment.get('LOG_LEVEL') or 'INFO').upper()
        )
