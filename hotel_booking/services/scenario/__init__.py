"""Scenario pipeline infrastructure for driving the booking engine."""

from .base_step import ScenarioStep
from .context import ScenarioContext
from .pipeline import ScenarioPipeline

__all__ = [
    "ScenarioStep",
    "ScenarioContext",
    "ScenarioPipeline",
]
