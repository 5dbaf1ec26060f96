"""Step to collect final hotel statistics."""

from hotel_booking.services.scenario import ScenarioContext, ScenarioStep


class CollectStatisticsStep(ScenarioStep):
    """Store the report service summary in the context statistics."""

    def __init__(self):
        super().__init__("CollectStatistics")

    def execute(self, context: ScenarioContext) -> bool:
        if context.report_service is None:
            self.logger.warning("No report service available, skipping statistics")
            return False

        context.stats["hotel"] = context.report_service.summary()
        return True
