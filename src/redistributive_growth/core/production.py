"""生産関数

ρ → 0 の特殊ケースとしてのCobb-Douglas型:

    Y = F(K, H, l, h) = A (H^α h^(1-α))^η (K^α l^(1-α))^(1-η)

K: 物的資本, H: 無形資本, l: 低技能労働, h: 高技能労働。
規模に関して収穫一定のため、オイラーの定理より要素所得の合計は産出に一致する。
"""

import math

from redistributive_growth.core.exceptions import NonPositiveInputError
from redistributive_growth.parameters.defaults import ModelParameters


def require_positive(**inputs: float) -> None:
    """全ての入力が正の有限値であることを確認する"""
    for name, value in inputs.items():
        if not (math.isfinite(value) and value > 0):
            raise NonPositiveInputError(f"{name} は正の有限値である必要があります: {value}")


def cobb_douglas(
    capital: float,
    intangible_capital: float,
    low_skill_labor: float,
    high_skill_labor: float,
    params: ModelParameters,
) -> float:
    """入力検証なしで Y を評価する

    numpy のスカラーを渡せば非有限値はそのまま伝播する。
    """
    alpha = params.alpha
    eta = params.eta

    intangible_block = intangible_capital**alpha * high_skill_labor ** (1 - alpha)
    physical_block = capital**alpha * low_skill_labor ** (1 - alpha)
    return params.A * intangible_block**eta * physical_block ** (1 - eta)


def production(
    capital: float,
    intangible_capital: float,
    low_skill_labor: float,
    high_skill_labor: float,
    params: ModelParameters,
) -> float:
    """産出 Y を計算する"""
    require_positive(
        capital=capital,
        intangible_capital=intangible_capital,
        low_skill_labor=low_skill_labor,
        high_skill_labor=high_skill_labor,
    )
    return cobb_douglas(capital, intangible_capital, low_skill_labor, high_skill_labor, params)


def production_at(capital: float, intangible_capital: float, params: ModelParameters) -> float:
    """非弾力的な労働供給 l = (1-ϕ)l̃, h = ϕh̃ の下での産出"""
    l, h = params.labor_supplies
    return production(capital, intangible_capital, l, h, params)


def output_elasticities(params: ModelParameters) -> tuple[float, float, float, float]:
    """(K, H, l, h) それぞれに対する産出弾力性

    合計は1（収穫一定）。
    """
    alpha = params.alpha
    eta = params.eta
    return (
        alpha * (1 - eta),
        alpha * eta,
        (1 - alpha) * (1 - eta),
        (1 - alpha) * eta,
    )
