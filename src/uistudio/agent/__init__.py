"""Agent module: planner, validator, generator and explainer."""

from .data_structures import (
    ALLOWED_COMPONENTS,
    KPI,
    ComponentName,
    Layout,
    PlanContent,
    PlanValidation,
    TableContent,
    Tone,
    UIModel,
    UIPlan,
)
from .explainer import explain_plan
from .generator import generate_code
from .planner import base_plan, plan_ui
from .studio_agent import StudioAgent
from .validator import ensure_valid_plan, raise_if_rejected, validate_plan

__all__ = [
    "ALLOWED_COMPONENTS",
    "KPI",
    "ComponentName",
    "Layout",
    "PlanContent",
    "PlanValidation",
    "StudioAgent",
    "TableContent",
    "Tone",
    "UIModel",
    "UIPlan",
    "base_plan",
    "ensure_valid_plan",
    "explain_plan",
    "generate_code",
    "plan_ui",
    "raise_if_rejected",
    "validate_plan",
]
