from dataclasses import dataclass
from typing import Dict, Any


def _mrkdwn(text: str) -> Dict[str, str]:
    return dict(type='mrkdwn', text=text)


@dataclass(frozen=True)
class DeploymentNotification:
    repository_name: str
    image_tag: str
    cluster: str
    service: str
    task_definition_arn: str
    timestamp: str

    def to_webhook_payload(self) -> Dict[str, Any]:
        return dict(blocks=[
            dict(type='header', text=dict(type='plain_text', text='ECS deployment completed 🚀')),
            dict(type='section', fields=[
                _mrkdwn(f'*Repository:*\n{self.repository_name}'),
                _mrkdwn(f'*Tag:*\n{self.image_tag}')
            ]),
            dict(type='section', fields=[
                _mrkdwn(f'*Cluster:*\n{self.cluster}'),
                _mrkdwn(f'*Service:*\n{self.service}')
            ]),
            dict(type='context', elements=[
                _mrkdwn(f'Deployed at: {self.timestamp}')
            ])
        ])
