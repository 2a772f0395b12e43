"""Redistributive Growth - 無形資本と再分配的成長の定常状態モデル"""

from importlib.metadata import PackageNotFoundError, version


def _resolve_version() -> str:
    """配布メタデータからバージョンを解決する。"""
    try:
        return version("redgrowth")
    except PackageNotFoundError:
        # インストール前のローカル実行時フォールバック
        return "0+unknown"


__version__ = _resolve_version()

from redistributive_growth.analysis.trends import TrendDirection, compare_scenarios
from redistributive_growth.core.equilibrium import equilibrium_residuals
from redistributive_growth.core.model import RedistributiveGrowthModel
from redistributive_growth.core.prices import factor_prices
from redistributive_growth.core.production import production
from redistributive_growth.core.solver import SteadyStateSolution, solve_steady_state
from redistributive_growth.parameters.defaults import ModelParameters

__all__ = [
    "ModelParameters",
    "RedistributiveGrowthModel",
    "SteadyStateSolution",
    "TrendDirection",
    "compare_scenarios",
    "equilibrium_residuals",
    "factor_prices",
    "production",
    "solve_steady_state",
]
