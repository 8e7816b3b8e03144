from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class PushEvent:
    repository_name: str
    image_tag: str
    account_id: str
    region: str

    @classmethod
    def from_event_bridge_event(cls, event: Dict[str, Any]) -> 'PushEvent':
        return cls(
            repository_name=event['detail']['repository-name'],
            image_tag=event['detail']['image-tag'],
            account_id=event['account'],
            region=event['region']
        )

    @property
    def image_uri(self) -> str:
        return f'{self.account_id}.dkr.ecr.{self.region}.amazonaws.com/{self.repository_name}:{self.image_tag}'
