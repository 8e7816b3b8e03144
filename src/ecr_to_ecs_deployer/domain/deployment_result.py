from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class DeploymentOutcome(Enum):
    DEPLOYED = 'deployed'
    SKIPPED_TAG = 'skipped_tag'
    NO_MATCHING_CONTAINER = 'no_matching_container'


@dataclass(frozen=True)
class DeploymentResult:
    outcome: DeploymentOutcome
    body: str
    status_code: int = 200

    def to_lambda_response(self) -> Dict[str, Any]:
        return dict(statusCode=self.status_code, body=self.body)
