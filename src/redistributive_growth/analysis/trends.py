"""長期トレンドの比較

無形資本へのシフト (η↑) が説明するとされるマクロ経済のトレンド:
    - 金利の低下 r↓
    - 無形資本シェアの上昇 H/(H+K)↑
    - 物的投資（対GDP）の低下 K/Y↓
    - 住宅ローン借入の増加 m/Y↑
    - 住宅価格の上昇 p/Y↑
    - 株価の上昇 f/Y↑
    - 賃金格差の拡大 q/w↑

2つの定常状態の間で各変数の変化の符号を分類する。
"""

from dataclasses import asdict, dataclass
from enum import Enum

from redistributive_growth.core.solver import SteadyStateSolution
from redistributive_growth.parameters.constants import TREND_CONSTANTS
from redistributive_growth.parameters.defaults import ModelParameters


class TrendDirection(Enum):
    """変化の方向"""

    INCREASED = "increased"
    DECREASED = "decreased"
    UNCHANGED = "unchanged"

    @property
    def arrow(self) -> str:
        return {
            TrendDirection.INCREASED: "↑",
            TrendDirection.DECREASED: "↓",
            TrendDirection.UNCHANGED: "→",
        }[self]


@dataclass(frozen=True)
class TrendVariables:
    """定常状態のトレンド変数"""

    r: float  # 金利
    H_HK: float  # 無形資本シェア H/(H+K)
    K_Y: float  # 物的資本/産出
    m_Y: float  # 住宅ローン/産出
    p_Y: float  # 地価/産出
    f_Y: float  # 株価/産出
    q_w: float  # 賃金格差 q/w

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


# 表示用ラベル
TREND_LABELS: dict[str, str] = {
    "r": "金利（r）",
    "H_HK": "無形資本シェア（H/(H+K)）",
    "K_Y": "物的資本/産出（K/Y）",
    "m_Y": "住宅ローン/産出（m/Y）",
    "p_Y": "地価/産出（p/Y）",
    "f_Y": "株価/産出（f/Y）",
    "q_w": "賃金格差（q/w）",
}


def mortgage_borrowing(
    land_price: float,
    share_price: float,
    wage_low: float,
    params: ModelParameters,
) -> float:
    """低技能家計の住宅ローン借入 m

    m = max(0, (1-ϕ)(p L̄ + f - w l̃))

    資産購入額が労働所得を下回る場合は借入ゼロにクランプする。
    """
    asset_purchases = land_price * params.L_bar + share_price
    borrowing = (1 - params.phi) * (asset_purchases - wage_low * params.l_tilde)
    return max(0.0, borrowing)


def compute_trend_variables(solution: SteadyStateSolution) -> TrendVariables:
    """定常状態解からトレンド変数を計算する"""
    k = solution.capital
    h = solution.intangible_capital
    relations = solution.relations
    prices = solution.prices
    y = relations.output

    m = mortgage_borrowing(
        relations.land_price, relations.share_price, prices.wage_low, solution.params
    )

    return TrendVariables(
        r=relations.interest_rate,
        H_HK=h / (h + k),
        K_Y=k / y,
        m_Y=m / y,
        p_Y=relations.land_price / y,
        f_Y=relations.share_price / y,
        q_w=prices.wage_ratio,
    )


def classify_change(
    new_value: float,
    old_value: float,
    tol: float = TREND_CONSTANTS.change_tolerance,
) -> TrendDirection:
    """old_value から new_value への変化を分類する"""
    if new_value > old_value + tol:
        return TrendDirection.INCREASED
    if new_value < old_value - tol:
        return TrendDirection.DECREASED
    return TrendDirection.UNCHANGED


def compare_trend_variables(
    baseline: TrendVariables,
    alternative: TrendVariables,
    tol: float = TREND_CONSTANTS.change_tolerance,
) -> dict[str, TrendDirection]:
    """変数ごとの変化の方向"""
    base = baseline.to_dict()
    alt = alternative.to_dict()
    return {key: classify_change(alt[key], base[key], tol) for key in base}


@dataclass(frozen=True)
class ScenarioComparison:
    """ベースラインと反実仮想の比較結果"""

    baseline: TrendVariables
    alternative: TrendVariables
    directions: dict[str, TrendDirection]

    def rows(self) -> list[tuple[str, float, float, TrendDirection]]:
        """(変数名, ベースライン値, 反実仮想値, 方向) のリスト"""
        base = self.baseline.to_dict()
        alt = self.alternative.to_dict()
        return [(key, base[key], alt[key], direction) for key, direction in self.directions.items()]


def compare_scenarios(
    baseline: SteadyStateSolution,
    alternative: SteadyStateSolution,
    tol: float = TREND_CONSTANTS.change_tolerance,
) -> dict[str, TrendDirection]:
    """2つの定常状態の間のトレンド変数の変化の方向を返す"""
    return build_comparison(baseline, alternative, tol).directions


def build_comparison(
    baseline: SteadyStateSolution,
    alternative: SteadyStateSolution,
    tol: float = TREND_CONSTANTS.change_tolerance,
) -> ScenarioComparison:
    """トレンド変数の比較結果を構築する

    収束していない解が渡された場合はConvergenceErrorを送出する。
    """
    baseline.require_converged()
    alternative.require_converged()
    base_vars = compute_trend_variables(baseline)
    alt_vars = compute_trend_variables(alternative)
    return ScenarioComparison(
        baseline=base_vars,
        alternative=alt_vars,
        directions=compare_trend_variables(base_vars, alt_vars, tol),
    )


def annualized_interest_rate(
    r: float,
    years_per_period: int = TREND_CONSTANTS.years_per_period,
) -> float:
    """1期間（1世代）の金利を年率に換算する

    家計は2期間生きるため、1期間はおよそ30年と解釈する。
    """
    return (1 + r) ** (1 / years_per_period) - 1
