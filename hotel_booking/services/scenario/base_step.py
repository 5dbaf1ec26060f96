"""Base class for scenario steps."""

from abc import ABC, abstractmethod

from structlog import get_logger

from .context import ScenarioContext

logger = get_logger(__name__)


class ScenarioStep(ABC):
    """Abstract base class for scenario steps.

    Each step should:
    1. Implement execute() method
    2. Read data from context
    3. Perform its work
    4. Write results back to context
    5. Return success boolean
    """

    def __init__(self, name: str | None = None):
        """Initialize the scenario step.

        Args:
            name: Optional custom name for the step. Defaults to class name.
        """
        self.name = name or self.__class__.__name__
        self.logger = logger.bind(step=self.name)

    @abstractmethod
    def execute(self, context: ScenarioContext) -> bool:
        """Execute the scenario step.

        Args:
            context: Scenario context containing shared data

        Returns:
            True if step succeeded, False if failed
        """
        pass

    def run(self, context: ScenarioContext) -> bool:
        """Run the step with error handling and logging.

        Args:
            context: Scenario context

        Returns:
            True if step succeeded, False if failed
        """
        self.logger.info("Step starting", hotel_id=context.hotel_id)

        try:
            success = self.execute(context)

            if success:
                self.logger.info("Step completed successfully", hotel_id=context.hotel_id)
            else:
                self.logger.warning("Step completed with failure", hotel_id=context.hotel_id)

            return success

        except Exception as e:
            self.logger.error(
                "Step failed with exception",
                hotel_id=context.hotel_id,
                error=str(e),
                exc_info=True,
            )
            context.add_error(self.name, str(e))
            return False

    def is_required(self) -> bool:
        """Check if this step is required for scenario success.

        Returns:
            True if step failure should stop the scenario, False if optional
        """
        return True

    def get_name(self) -> str:
        return self.name
