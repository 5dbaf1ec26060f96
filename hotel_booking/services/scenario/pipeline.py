"""Pipeline executing a booking scenario step by step."""

from structlog import get_logger

from .base_step import ScenarioStep
from .context import ScenarioContext

logger = get_logger(__name__)


class ScenarioPipeline:
    """Pipeline for executing a sequence of scenario steps.

    The pipeline:
    1. Executes steps in order
    2. Passes context between steps
    3. Stops when a required step fails
    4. Collects step statistics
    """

    def __init__(self, name: str, steps: list[ScenarioStep]):
        """Initialize the pipeline.

        Args:
            name: Pipeline name for logging
            steps: List of scenario steps to execute in order
        """
        self.name = name
        self.steps = steps
        self.logger = logger.bind(pipeline=name)

    def execute(self, context: ScenarioContext) -> ScenarioContext:
        """Execute the pipeline.

        Args:
            context: Scenario context

        Returns:
            Updated context with results
        """
        self.logger.info("Pipeline starting", step_count=len(self.steps))

        successful_steps = 0
        failed_steps = 0

        for step in self.steps:
            step_name = step.get_name()
            self.logger.info("Executing step", hotel_id=context.hotel_id, step=step_name)

            if step.run(context):
                successful_steps += 1
                continue

            failed_steps += 1
            if step.is_required():
                self.logger.error(
                    "Required step failed, stopping pipeline",
                    hotel_id=context.hotel_id,
                    step=step_name,
                )
                break

            self.logger.warning(
                "Optional step failed, continuing pipeline",
                hotel_id=context.hotel_id,
                step=step_name,
            )

        # Mark success if no errors
        context.success = not context.has_errors()

        context.stats["pipeline"] = {
            "name": self.name,
            "total_steps": len(self.steps),
            "successful_steps": successful_steps,
            "failed_steps": failed_steps,
        }

        self.logger.info(
            "Pipeline completed",
            hotel_id=context.hotel_id,
            success=context.success,
            successful_steps=successful_steps,
            failed_steps=failed_steps,
        )

        return context

    def add_step(self, step: ScenarioStep) -> "ScenarioPipeline":
        """Add a step to the pipeline.

        Args:
            step: Scenario step to add

        Returns:
            Self for method chaining
        """
        self.steps.append(step)
        return self

    def get_step_names(self) -> list[str]:
        return [step.get_name() for step in self.steps]
