"""モデル定数の定義

マジックナンバーを排除し、意味のある名前を付ける
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConstants:
    """ソルバーの定数"""

    method: str = "BFGS"
    convergence_tolerance: float = 1e-10  # 残差二乗和の許容値
    relative_tolerance: float = 1e-6  # 規模で割った残差の許容値
    gradient_tolerance: float = 1e-12
    max_iterations: int = 1000
    invalid_objective_penalty: float = 1e10  # 非有限値の代替ペナルティ

    # 初期値（金利が正となる点）
    initial_capital: float = 0.4
    initial_intangible_capital: float = 1.0


@dataclass(frozen=True)
class TrendConstants:
    """定常状態比較の定数"""

    change_tolerance: float = 1e-6  # これ未満の差は「変化なし」
    years_per_period: int = 30  # 1期間 = 1世代


SOLVER_CONSTANTS = SolverConstants()
TREND_CONSTANTS = TrendConstants()
