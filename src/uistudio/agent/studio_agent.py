"""Three-step UI agent: planner, generator, explainer.

Hidden design decisions:
- Stage order and where validation sits between them
- How stage implementations are swapped in (tests, alternative planners)
- Debug message routing
"""

from collections.abc import Callable
from typing import Any

from .data_structures import PlanValidation, UIModel, UIPlan
from .explainer import explain_plan
from .generator import generate_code
from .planner import plan_ui
from .validator import raise_if_rejected, validate_plan

PlannerFn = Callable[[str, UIPlan | None], UIPlan]
ValidatorFn = Callable[[UIPlan], PlanValidation]
GeneratorFn = Callable[[UIPlan], str]
ExplainerFn = Callable[[UIPlan], str]


class StudioAgent:
    """Deterministic agent that turns chat text into a versionable UIModel.

    Every call runs synchronously to completion. A plan that fails
    validation stops the run before code generation.
    """

    def __init__(
        self,
        planner: PlannerFn = plan_ui,
        validator: ValidatorFn = validate_plan,
        generator: GeneratorFn = generate_code,
        explainer: ExplainerFn = explain_plan,
    ):
        """Initialize the agent.

        Args:
            planner: Builds a candidate plan from text and a previous plan
            validator: Accepts or rejects a candidate plan
            generator: Renders a valid plan into code text
            explainer: Describes a valid plan in prose
        """
        self._planner = planner
        self._validator = validator
        self._generator = generator
        self._explainer = explainer
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def plan(self, text: str, previous: UIPlan | None = None) -> UIPlan:
        """Run only the planner."""
        plan = self._planner(text, previous)
        self._debug(
            "debug",
            "Planner",
            f"{'modify' if previous is not None else 'generate'}: "
            f"layout={plan.layout} tone={plan.tone} components={len(plan.components)}",
        )
        return plan

    def validate(self, plan: UIPlan) -> PlanValidation:
        """Run only the validator."""
        result = self._validator(plan)
        if result.ok:
            self._debug("debug", "Validator", "Plan accepted")
        else:
            self._debug("warning", "Validator", f"Plan rejected: {result.error}")
        return result

    def build(self, plan: UIPlan) -> UIModel:
        """Generate code and explanation for an already validated plan."""
        code = self._generator(plan)
        self._debug("debug", "Generator", f"Generated {len(code.splitlines())} lines")
        explanation = self._explainer(plan)
        self._debug("debug", "Explainer", f"Explanation has {len(explanation)} characters")
        return UIModel(plan=plan, code=code, explanation=explanation)

    def run(self, text: str, previous: UIPlan | None = None) -> UIModel:
        """Plan, validate, generate and explain.

        Args:
            text: Free-text request
            previous: Plan to modify, or None to generate from scratch

        Returns:
            The new UIModel

        Raises:
            PlanValidationError: If the candidate plan is rejected. The
                generator and explainer are not called in that case.
        """
        plan = self.plan(text, previous)
        raise_if_rejected(self.validate(plan), plan)
        return self.build(plan)
