"""Run execution domain exports."""

from .governance_check_use_case import GovernanceRunError, execute_governance_check
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "GovernanceRunError",
    "execute_governance_check",
]
