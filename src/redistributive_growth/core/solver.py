"""定常状態ソルバー

2本の均衡残差 eq_1, eq_2 の二乗和を (log K, log H) について最小化する。
対数変換により K, H は常に正となる。

最小化アルゴリズムは大域解を保証しない。金利が負となる経済学的に無意味な
極小点に収束することがあるため、初期値は正の金利に対応する点でなければならない。
最小化の後は必ず目的関数値がゼロに十分近いかを確認する。

K, H → 0 では残差の各項もゼロに近づくため、目的関数値だけでは偽の解を
見分けられない。残差を K, H, Y の規模で割った値も許容値以内であることを要求する。
"""

import logging
import math
from dataclasses import dataclass

import numpy as np
import scipy.optimize

from redistributive_growth.core.equilibrium import (
    SteadyStateRelations,
    equilibrium_residuals,
    evaluate_relations,
    jacobian_from_relations,
    residuals_from_relations,
    steady_state_relations,
)
from redistributive_growth.core.exceptions import ConvergenceError, InvalidInitialGuessError
from redistributive_growth.core.prices import FactorPrices, factor_prices
from redistributive_growth.core.production import require_positive
from redistributive_growth.parameters.constants import SOLVER_CONSTANTS, SolverConstants
from redistributive_growth.parameters.defaults import ModelParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SteadyStateSolution:
    """定常状態の解

    converged が False の解は有効な定常状態として扱ってはならない。
    """

    params: ModelParameters
    capital: float
    intangible_capital: float
    objective_value: float
    scaled_residual: float
    converged: bool
    iterations: int
    message: str
    initial_capital: float
    initial_intangible_capital: float

    @property
    def relations(self) -> SteadyStateRelations:
        """Y, r, R_H, f, p"""
        return steady_state_relations(self.capital, self.intangible_capital, self.params)

    @property
    def prices(self) -> FactorPrices:
        return factor_prices(self.capital, self.intangible_capital, self.params)

    @property
    def residuals(self) -> tuple[float, float]:
        return equilibrium_residuals(self.capital, self.intangible_capital, self.params)

    @property
    def interest_rate(self) -> float:
        return self.relations.interest_rate

    @property
    def economically_valid(self) -> bool:
        """金利が正（経済学的に意味のある解）か"""
        return self.interest_rate > 0

    def require_converged(self) -> "SteadyStateSolution":
        """収束していなければConvergenceErrorを送出する"""
        if not self.converged:
            raise ConvergenceError(
                f"定常状態ソルバーが収束しませんでした: 目的関数値={self.objective_value:.3e}, "
                f"相対残差={self.scaled_residual:.3e} ({self.message})"
            )
        return self


class SteadyStateSolver:
    """残差二乗和の最小化による定常状態ソルバー"""

    def __init__(
        self,
        params: ModelParameters,
        constants: SolverConstants = SOLVER_CONSTANTS,
    ) -> None:
        self.params = params
        self.constants = constants

    def objective(self, log_k_log_h: np.ndarray) -> float:
        """目的関数 eq_1² + eq_2²"""
        value, _ = self._objective_and_gradient(log_k_log_h)
        return value

    def _objective_and_gradient(self, log_k_log_h: np.ndarray) -> tuple[float, np.ndarray]:
        with np.errstate(over="ignore"):
            capital, intangible_capital = np.exp(np.asarray(log_k_log_h, dtype=float))

        relations = evaluate_relations(capital, intangible_capital, self.params)
        residuals = np.array(
            residuals_from_relations(capital, intangible_capital, relations, self.params)
        )
        jacobian = jacobian_from_relations(capital, intangible_capital, relations, self.params)

        with np.errstate(over="ignore", invalid="ignore"):
            value = float(residuals @ residuals)
            gradient = 2.0 * jacobian.T @ residuals

        # r = 0 の近傍やオーバーフロー時は大きなペナルティを返す
        if not (math.isfinite(value) and np.all(np.isfinite(gradient))):
            return self.constants.invalid_objective_penalty, np.zeros(2)
        return value, gradient

    def scaled_residual(self, capital: float, intangible_capital: float) -> float:
        """max(|eq_1|/H, |eq_2|/max(K, Y))

        非有限値になる点では inf を返す。
        """
        relations = evaluate_relations(capital, intangible_capital, self.params)
        eq_1, eq_2 = residuals_from_relations(capital, intangible_capital, relations, self.params)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            ratios = np.abs([eq_1, eq_2]) / np.array(
                [intangible_capital, max(capital, relations.output)]
            )
        if not np.all(np.isfinite(ratios)):
            return math.inf
        return float(ratios.max())

    def check_initial_guess(
        self, initial_capital: float, initial_intangible_capital: float
    ) -> float:
        """初期値の妥当性を検証し、対応する金利を返す"""
        require_positive(
            initial_capital=initial_capital,
            initial_intangible_capital=initial_intangible_capital,
        )
        relations = steady_state_relations(initial_capital, initial_intangible_capital, self.params)
        r = relations.interest_rate
        if not r > 0:
            raise InvalidInitialGuessError(
                f"初期値 (K={initial_capital}, H={initial_intangible_capital}) に対応する金利が"
                f"正ではありません: r={r:.4f}"
            )
        return r

    def solve(
        self,
        initial_capital: float | None = None,
        initial_intangible_capital: float | None = None,
        tol: float | None = None,
    ) -> SteadyStateSolution:
        """定常状態を求める

        Args:
            initial_capital: K の初期値
            initial_intangible_capital: H の初期値
            tol: 収束判定に用いる目的関数値の許容値

        Returns:
            SteadyStateSolution。目的関数値または相対残差が許容値を超えた場合は
            converged=False

        Raises:
            ValidationError: 初期値が非正の場合
            InvalidInitialGuessError: 初期値に対応する金利が正でない場合
        """
        k0 = self.constants.initial_capital if initial_capital is None else initial_capital
        h0 = (
            self.constants.initial_intangible_capital
            if initial_intangible_capital is None
            else initial_intangible_capital
        )
        tolerance = self.constants.convergence_tolerance if tol is None else tol

        self.check_initial_guess(k0, h0)

        result = scipy.optimize.minimize(
            self._objective_and_gradient,
            np.log([k0, h0]),
            method=self.constants.method,
            jac=True,
            options={
                "maxiter": self.constants.max_iterations,
                "gtol": self.constants.gradient_tolerance,
            },
        )

        capital, intangible_capital = (float(v) for v in np.exp(result.x))
        objective_value = float(result.fun)
        scaled_residual = self.scaled_residual(capital, intangible_capital)
        converged = (
            objective_value <= tolerance and scaled_residual <= self.constants.relative_tolerance
        )

        solution = SteadyStateSolution(
            params=self.params,
            capital=capital,
            intangible_capital=intangible_capital,
            objective_value=objective_value,
            scaled_residual=scaled_residual,
            converged=converged,
            iterations=int(result.nit),
            message=str(result.message),
            initial_capital=float(k0),
            initial_intangible_capital=float(h0),
        )

        if not converged:
            logger.warning(
                "定常状態ソルバーが収束しません: 目的関数値 %.3e (許容値 %.1e), "
                "相対残差 %.3e (許容値 %.1e), K=%.3e, H=%.3e",
                objective_value,
                tolerance,
                scaled_residual,
                self.constants.relative_tolerance,
                capital,
                intangible_capital,
            )
        elif not solution.economically_valid:
            logger.warning("金利が正でない解に収束しました: r=%.4f", solution.interest_rate)
        else:
            logger.info(
                "定常状態: K=%.6f, H=%.6f (目的関数値 %.2e, 反復 %d)",
                capital,
                intangible_capital,
                objective_value,
                solution.iterations,
            )

        return solution


def solve_steady_state(
    params: ModelParameters,
    initial_capital: float = SOLVER_CONSTANTS.initial_capital,
    initial_intangible_capital: float = SOLVER_CONSTANTS.initial_intangible_capital,
    tol: float = SOLVER_CONSTANTS.convergence_tolerance,
) -> SteadyStateSolution:
    """定常状態を求める（関数インターフェース）"""
    solver = SteadyStateSolver(params)
    return solver.solve(initial_capital, initial_intangible_capital, tol=tol)
