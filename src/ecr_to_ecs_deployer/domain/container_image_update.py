from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ContainerImageUpdate:
    container_name: str
    old_image: Optional[str]
    new_image: str
