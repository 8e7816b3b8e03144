from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceDescriptor:
    cluster: str
    service: str
    task_definition_arn: str
