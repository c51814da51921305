"""Result models — cost comparison output contracts."""

from solar_switch.models.results import (
    CostComparison,
    GeneratorScenario,
    GridScenario,
    PowerDistribution,
    SavingsSummary,
    ScenarioResult,
    SolarScenario,
)

__all__ = [
    "CostComparison",
    "GeneratorScenario",
    "GridScenario",
    "PowerDistribution",
    "SavingsSummary",
    "ScenarioResult",
    "SolarScenario",
]
