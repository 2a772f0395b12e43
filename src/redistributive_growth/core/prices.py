"""要素価格

生産関数の勾配が各要素の限界生産物、すなわち要素価格となる:
    ∂F/∂K = 1 + r  (物的資本の粗収益率)
    ∂F/∂H = R_H    (無形資本のレンタル率)
    ∂F/∂l = w      (低技能賃金)
    ∂F/∂h = q      (高技能賃金)

Cobb-Douglas型では ∂F/∂x_i = ε_i Y / x_i （ε_i は産出弾力性）と閉形式で書ける。
"""

from dataclasses import dataclass

import numpy as np

from redistributive_growth.core.production import output_elasticities, production
from redistributive_growth.parameters.defaults import ModelParameters


@dataclass(frozen=True)
class FactorPrices:
    """要素価格と会計恒等式チェック"""

    gross_interest_rate: float  # 1 + r
    intangible_rental_rate: float  # R_H
    wage_low: float  # w
    wage_high: float  # q
    output: float  # Y
    accounting_residual: float  # Y - Σ 要素支払い（≈ 0）

    @property
    def interest_rate(self) -> float:
        """純金利 r"""
        return self.gross_interest_rate - 1.0

    @property
    def wage_ratio(self) -> float:
        """賃金格差 q/w"""
        return self.wage_high / self.wage_low


def production_gradient(
    capital: float,
    intangible_capital: float,
    low_skill_labor: float,
    high_skill_labor: float,
    params: ModelParameters,
) -> np.ndarray:
    """生産関数の (K, H, l, h) に関する勾配"""
    y = production(capital, intangible_capital, low_skill_labor, high_skill_labor, params)
    inputs = np.array([capital, intangible_capital, low_skill_labor, high_skill_labor])
    elasticities = np.array(output_elasticities(params))
    return elasticities * y / inputs


def factor_prices(
    capital: float, intangible_capital: float, params: ModelParameters
) -> FactorPrices:
    """(K, H) における要素価格を計算する"""
    l, h = params.labor_supplies
    y = production(capital, intangible_capital, l, h, params)
    gross_r, r_h, w, q = production_gradient(capital, intangible_capital, l, h, params)

    check = y - w * l - q * h - gross_r * capital - r_h * intangible_capital

    return FactorPrices(
        gross_interest_rate=float(gross_r),
        intangible_rental_rate=float(r_h),
        wage_low=float(w),
        wage_high=float(q),
        output=float(y),
        accounting_residual=float(check),
    )
