from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NotificationResult:
    delivered: bool
    status_code: Optional[int] = None
    failure_kind: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def success(cls, status_code: int) -> 'NotificationResult':
        return cls(delivered=True, status_code=status_code)

    @classmethod
    def failure(cls, failure_kind: str, detail: str, status_code: Optional[int] = None) -> 'NotificationResult':
        return cls(delivered=False, status_code=status_code, failure_kind=failure_kind, detail=detail)
