import logging
from typing import Iterator

import pytest
from botocore.exceptions import ClientError

from ecr_to_ecs_deployer import index
from ecr_to_ecs_deployer.domain.deployment_result import DeploymentResult, DeploymentOutcome
from ecr_to_ecs_deployer.domain.service_deployer import ServiceDeployer
from ecr_to_ecs_deployer.missing_configuration_exception import MissingConfigurationException
from ecr_to_ecs_deployer_tests.support.builders.push_event_builder import an_event_bridge_push_event_with, \
    a_push_event_with
from ecr_to_ecs_deployer_tests.support.mocking import mock_class, when_calling, verify


@pytest.fixture(autouse=True)
def reset_service_deployer() -> Iterator[None]:
    root_log_level = index.logger.level
    index.service_deployer = None
    yield
    index.service_deployer = None
    index.logger.setLevel(root_log_level)


@pytest.fixture
def service_deployer() -> ServiceDeployer:
    service_deployer = mock_class(ServiceDeployer)
    index.service_deployer = service_deployer
    return service_deployer


def test_deploys_push_event_and_returns_lambda_response(service_deployer: ServiceDeployer) -> None:
    when_calling(service_deployer.deploy).always_return(
        DeploymentResult(DeploymentOutcome.DEPLOYED, 'Successfully updated api-svc with api:latest')
    )

    response = index.handler(an_event_bridge_push_event_with(repository_name='api', image_tag='latest'), None)

    assert response == dict(statusCode=200, body='Successfully updated api-svc with api:latest')
    verify(service_deployer.deploy).was_called_once_with(a_push_event_with(repository_name='api', image_tag='latest'))


def test_reraises_deployment_failures(service_deployer: ServiceDeployer) -> None:
    when_calling(service_deployer.deploy).always_raise(ClientError(
        dict(Error=dict(Code='AccessDeniedException', Message='not authorised')),
        'DescribeServices'
    ))

    with pytest.raises(ClientError, match='AccessDeniedException'):
        index.handler(an_event_bridge_push_event_with(), None)


def test_builds_service_deployer_once_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('ECS_CLUSTER', 'prod')
    monkeypatch.setenv('ECS_SERVICE', 'api-svc')
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    monkeypatch.setenv('SLACK_WEBHOOK_URL', 'https://hooks.slack.com/services/T000/B000/XXXX')

    first_service_deployer = index.get_service_deployer()

    assert isinstance(first_service_deployer, ServiceDeployer)
    assert index.get_service_deployer() is first_service_deployer


def test_applies_configured_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('ECS_CLUSTER', 'prod')
    monkeypatch.setenv('ECS_SERVICE', 'api-svc')
    monkeypatch.setenv('AWS_REGION', 'us-east-1')
    monkeypatch.setenv('LOG_LEVEL', 'warning')

    index.get_service_deployer()

    assert index.logger.level == logging.WARNING


def test_fails_invocation_when_configuration_is_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('ECS_CLUSTER', raising=False)
    monkeypatch.setenv('ECS_SERVICE', 'api-svc')

    with pytest.raises(MissingConfigurationException, match='ECS_CLUSTER'):
        index.handler(an_event_bridge_push_event_with(), None)
