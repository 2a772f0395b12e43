"""パラメータ管理"""

from redistributive_growth.parameters.constants import (
    SOLVER_CONSTANTS,
    TREND_CONSTANTS,
    SolverConstants,
    TrendConstants,
)
from redistributive_growth.parameters.defaults import PARAMETER_DESCRIPTIONS, ModelParameters
from redistributive_growth.parameters.scenarios import (
    GROWTH_DRIVERS,
    GrowthDriver,
    get_growth_driver,
)

__all__ = [
    "GROWTH_DRIVERS",
    "GrowthDriver",
    "ModelParameters",
    "PARAMETER_DESCRIPTIONS",
    "SOLVER_CONSTANTS",
    "SolverConstants",
    "TREND_CONSTANTS",
    "TrendConstants",
    "get_growth_driver",
]
