from copy import deepcopy
from dataclasses import dataclass
from typing import Dict, Any, List, Tuple, FrozenSet

from ecr_to_ecs_deployer.domain.container_image_update import ContainerImageUpdate
from ecr_to_ecs_deployer.domain.push_event import PushEvent

SERVER_ASSIGNED_FIELDS: FrozenSet[str] = frozenset([
    'taskDefinitionArn',
    'revision',
    'status',
    'requiresAttributes',
    'compatibilities',
    'registeredAt',
    'registeredBy',
    'deregisteredAt',
])


@dataclass(frozen=True)
class TaskDefinition:
    """Snapshot of an ECS task definition as returned by DescribeTaskDefinition.

    Transformations return new instances; the wrapped fields are never mutated.
    """
    fields: Dict[str, Any]

    @property
    def arn(self) -> str:
        return self.fields['taskDefinitionArn']

    @property
    def container_definitions(self) -> List[Dict[str, Any]]:
        return self.fields.get('containerDefinitions') or []

    def sanitised_for_registration(self) -> 'TaskDefinition':
        return TaskDefinition({
            name: deepcopy(value) for name, value in self.fields.items() if name not in SERVER_ASSIGNED_FIELDS
        })

    def with_container_image(self, push_event: PushEvent,
                             match_image_substring: bool = False) -> Tuple['TaskDefinition', List[ContainerImageUpdate]]:
        fields = deepcopy(self.fields)
        new_image = push_event.image_uri
        updates = []

        for container_definition in fields.get('containerDefinitions') or []:
            if self.__matches(container_definition, push_event.repository_name, match_image_substring):
                updates.append(ContainerImageUpdate(
                    container_name=container_definition['name'],
                    old_image=container_definition.get('image'),
                    new_image=new_image
                ))
                container_definition['image'] = new_image

        return TaskDefinition(fields), updates

    def registration_parameters(self) -> Dict[str, Any]:
        return deepcopy(self.fields)

    @staticmethod
    def __matches(container_definition: Dict[str, Any], repository_name: str, match_image_substring: bool) -> bool:
        if container_definition.get('name') == repository_name:
            return True

        image = container_definition.get('image')
        return match_image_substring and image is not None and repository_name in image
