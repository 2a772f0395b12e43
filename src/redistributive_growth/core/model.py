"""Redistributive Growthモデル本体

定常状態・要素価格・トレンド変数を遅延評価でキャッシュする。
"""

from redistributive_growth.analysis.trends import (
    ScenarioComparison,
    TrendVariables,
    build_comparison,
    compute_trend_variables,
)
from redistributive_growth.core.prices import FactorPrices
from redistributive_growth.core.solver import SteadyStateSolution, SteadyStateSolver
from redistributive_growth.parameters.constants import SOLVER_CONSTANTS, SolverConstants
from redistributive_growth.parameters.defaults import ModelParameters
from redistributive_growth.parameters.scenarios import GrowthDriver


class RedistributiveGrowthModel:
    """Döttling and Perotti (2019) の定常状態モデル"""

    def __init__(
        self,
        params: ModelParameters | None = None,
        constants: SolverConstants = SOLVER_CONSTANTS,
    ) -> None:
        self.params = params or ModelParameters()
        self.constants = constants
        self._steady_state: SteadyStateSolution | None = None

    @property
    def steady_state(self) -> SteadyStateSolution:
        """定常状態（収束していない場合はConvergenceError）"""
        if self._steady_state is None:
            self._steady_state = self.compute_steady_state().require_converged()
        return self._steady_state

    @property
    def factor_prices(self) -> FactorPrices:
        return self.steady_state.prices

    @property
    def trend_variables(self) -> TrendVariables:
        return compute_trend_variables(self.steady_state)

    def compute_steady_state(
        self,
        initial_capital: float | None = None,
        initial_intangible_capital: float | None = None,
    ) -> SteadyStateSolution:
        solver = SteadyStateSolver(self.params, self.constants)
        return solver.solve(initial_capital, initial_intangible_capital)

    def counterfactual(self, driver: GrowthDriver) -> "RedistributiveGrowthModel":
        """成長要因を適用したモデル"""
        return RedistributiveGrowthModel(driver.apply(self.params), self.constants)

    def compare_with(self, other: "RedistributiveGrowthModel") -> ScenarioComparison:
        """このモデルをベースラインとして他のモデルと比較する"""
        return build_comparison(self.steady_state, other.steady_state)
