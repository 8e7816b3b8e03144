from datetime import datetime, timezone
from typing import Dict, Any, List, Optional

from ecr_to_ecs_deployer.domain.task_definition import TaskDefinition

CURRENT_TASK_DEFINITION_ARN = 'arn:aws:ecs:us-east-1:123:task-definition/api:7'


def a_container_definition_with(name: str = 'api', image: str = '123.dkr.ecr.us-east-1.amazonaws.com/api:old'
                                ) -> Dict[str, Any]:
    return dict(name=name, image=image, essential=True, portMappings=[dict(containerPort=8080)])


def task_definition_fields_with(container_definitions: Optional[List[Dict[str, Any]]] = None,
                                task_definition_arn: str = CURRENT_TASK_DEFINITION_ARN, status: str = 'ACTIVE',
                                deregistered_at: Optional[datetime] = None) -> Dict[str, Any]:
    fields = dict(
        taskDefinitionArn=task_definition_arn,
        family='api',
        containerDefinitions=container_definitions if container_definitions is not None else [
            a_container_definition_with()
        ],
        networkMode='awsvpc',
        cpu='256',
        memory='512',
        requiresCompatibilities=['FARGATE'],
        revision=7,
        status=status,
        requiresAttributes=[dict(name='com.amazonaws.ecs.capability.docker-remote-api.1.18')],
        compatibilities=['EC2', 'FARGATE'],
        registeredAt=datetime(2024, 1, 1, tzinfo=timezone.utc),
        registeredBy='arn:aws:iam::123:role/deployer'
    )

    if deregistered_at is not None:
        fields['deregisteredAt'] = deregistered_at

    return fields


def an_inactive_task_definition_fields_with(container_definitions: Optional[List[Dict[str, Any]]] = None
                                            ) -> Dict[str, Any]:
    return task_definition_fields_with(
        container_definitions,
        status='INACTIVE',
        deregistered_at=datetime(2024, 2, 1, tzinfo=timezone.utc)
    )


def a_task_definition_with(container_definitions: Optional[List[Dict[str, Any]]] = None,
                           task_definition_arn: str = CURRENT_TASK_DEFINITION_ARN) -> TaskDefinition:
    return TaskDefinition(task_definition_fields_with(container_definitions, task_definition_arn))


def an_inactive_task_definition_with(container_definitions: Optional[List[Dict[str, Any]]] = None
                                     ) -> TaskDefinition:
    return TaskDefinition(an_inactive_task_definition_fields_with(container_definitions))
