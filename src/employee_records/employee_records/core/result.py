from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Dict, Optional

from .enums import ErrorKind
from .exceptions import BackingStoreError, DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Tagged result returned by every public service operation.

    Success carries a payload (merged into the response dict), failure carries
    an error kind and a human-readable message.
    """

    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, **data: Any) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, error=message, error_kind=kind)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, **self.data}
        return {
            "success": False,
            "error": self.error,
            "errorKind": self.error_kind.value if self.error_kind else None,
        }


def result_boundary(action: str):
    """Convert every fault raised by the wrapped operation into a failed ``OperationResult``.

    Domain errors keep their own message; store and unexpected faults are
    reported as ``BackingStoreFailure`` prefixed with ``action``.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs) -> OperationResult:
            try:
                return func(*args, **kwargs)
            except DomainError as e:
                return OperationResult.fail(e.kind, str(e))
            except BackingStoreError as e:
                logger.error("%s: %s", action, e)
                return OperationResult.fail(ErrorKind.BACKING_STORE_FAILURE, f"{action}: {e}")
            except Exception as e:
                logger.exception("%s", action)
                return OperationResult.fail(ErrorKind.BACKING_STORE_FAILURE, f"{action}: {e}")

        return wrapper

    return decorator
