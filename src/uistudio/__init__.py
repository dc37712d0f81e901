"""
UI Studio: a deterministic UI builder.

Turns free text into a whitelisted UI plan, checks it against guardrails,
and renders preview code plus a plain-language explanation. Every accepted
plan is kept in a version history that can be rolled back.
"""

__version__ = "0.1.0"

from .agent import (
    ALLOWED_COMPONENTS,
    StudioAgent,
    UIModel,
    UIPlan,
    explain_plan,
    generate_code,
    plan_ui,
    validate_plan,
)
from .errors import PlanValidationError, StudioError, VersionNotFoundError
from .session import StudioSession
from .versions import InMemoryVersionStore, VersionStore, create_version_store

__all__ = [
    "ALLOWED_COMPONENTS",
    "InMemoryVersionStore",
    "PlanValidationError",
    "StudioAgent",
    "StudioError",
    "StudioSession",
    "UIModel",
    "UIPlan",
    "VersionNotFoundError",
    "VersionStore",
    "create_version_store",
    "explain_plan",
    "generate_code",
    "plan_ui",
    "validate_plan",
]
