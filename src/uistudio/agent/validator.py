"""Plan validation against the component whitelist.

Checks run in a fixed order and stop at the first failure, so a plan
always gets the same single reason back.
"""

from ..errors import PlanValidationError
from .data_structures import ALLOWED_COMPONENTS, PlanValidation, UIPlan

MISSING_LAYOUT_OR_TONE = "Plan missing layout/tone."
NO_COMPONENTS = "Plan needs at least one component."
MISSING_TITLE = "Plan missing title."
REJECTED_FALLBACK = "Plan rejected."


def validate_plan(plan: UIPlan) -> PlanValidation:
    """Validate a candidate plan.

    Args:
        plan: The plan to check

    Returns:
        PlanValidation with ok=True, or ok=False and the rejection reason
    """
    if not plan.layout or not plan.tone:
        return PlanValidation(ok=False, error=MISSING_LAYOUT_OR_TONE)

    if not plan.components:
        return PlanValidation(ok=False, error=NO_COMPONENTS)

    for component in plan.components:
        if component not in ALLOWED_COMPONENTS:
            return PlanValidation(ok=False, error=f"Component not allowed: {component}")

    if not plan.content.title:
        return PlanValidation(ok=False, error=MISSING_TITLE)

    return PlanValidation(ok=True)


def raise_if_rejected(result: PlanValidation, plan: UIPlan) -> UIPlan:
    """Turn a failed validation result into a PlanValidationError.

    Raises:
        PlanValidationError: Carrying the result's reason and the plan
    """
    if not result.ok:
        raise PlanValidationError(result.error or REJECTED_FALLBACK, plan)
    return plan


def ensure_valid_plan(plan: UIPlan) -> UIPlan:
    """Return the plan unchanged, or raise if it fails validation.

    Raises:
        PlanValidationError: With the first failing check as its reason
    """
    return raise_if_rejected(validate_plan(plan), plan)
