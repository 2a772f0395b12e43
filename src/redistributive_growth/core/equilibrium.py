"""定常状態の均衡条件

定常状態の {K, H, Y, r, R_H, f, p} を記述する方程式（論文付録）:

    1 + r = α(1-η) Y/K                  (1) 物的資本の一階条件
    R_H   = αη Y/H                      (2) 無形資本の一階条件
    H     = (ω/ψ) R_H                   (3) 無形資本の供給
    f     = (1-ω) R_H H / r             (4) 株価 = 配当の割引現在価値
    p     = v'(L̄)/r = 1/(L̄ r)           (5) 地価
    (1-α+x) Y = p L̄ + f + K             (6) 貯蓄と資産の均衡

Y, r, R_H, f, p を代入消去すると K, H のみの2本の残差方程式に帰着する。
"""

from dataclasses import dataclass

import numpy as np

from redistributive_growth.core.production import (
    cobb_douglas,
    output_elasticities,
    require_positive,
)
from redistributive_growth.parameters.defaults import ModelParameters


@dataclass(frozen=True)
class SteadyStateRelations:
    """(K, H) から閉形式で導出される変数"""

    output: float  # Y
    interest_rate: float  # r
    intangible_rental_rate: float  # R_H
    share_price: float  # f
    land_price: float  # p


def evaluate_relations(
    capital: float, intangible_capital: float, params: ModelParameters
) -> SteadyStateRelations:
    """入力検証なしで式(1), (2), (4), (5)を評価する

    r = 0 のとき f, p は非有限値になる。
    """
    a_k, a_h, _, _ = output_elasticities(params)
    l, h = params.labor_supplies

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k = np.float64(capital)
        hh = np.float64(intangible_capital)
        y = cobb_douglas(k, hh, l, h, params)
        r = a_k * y / k - 1
        r_h = a_h * y / hh
        f = (1 - params.omega) * r_h * hh / r
        p = 1 / (params.L_bar * r)

    return SteadyStateRelations(
        output=float(y),
        interest_rate=float(r),
        intangible_rental_rate=float(r_h),
        share_price=float(f),
        land_price=float(p),
    )


def residuals_from_relations(
    capital: float,
    intangible_capital: float,
    relations: SteadyStateRelations,
    params: ModelParameters,
) -> tuple[float, float]:
    """導出済みの変数から式(3), 式(6)の残差を計算する"""
    eq_1 = intangible_capital - params.omega / params.psi * relations.intangible_rental_rate
    eq_2 = (
        (1 - params.alpha + params.x) * relations.output
        - relations.land_price * params.L_bar
        - relations.share_price
        - capital
    )
    return eq_1, eq_2


def steady_state_relations(
    capital: float, intangible_capital: float, params: ModelParameters
) -> SteadyStateRelations:
    """Y, r, R_H, f, p を計算する"""
    require_positive(capital=capital, intangible_capital=intangible_capital)
    return evaluate_relations(capital, intangible_capital, params)


def equilibrium_residuals(
    capital: float, intangible_capital: float, params: ModelParameters
) -> tuple[float, float]:
    """均衡残差 (式(3), 式(6)) を返す

    定常状態では両方ともゼロになる。
    """
    relations = steady_state_relations(capital, intangible_capital, params)
    return residuals_from_relations(capital, intangible_capital, relations, params)


def residual_jacobian_log(
    capital: float, intangible_capital: float, params: ModelParameters
) -> np.ndarray:
    """残差の (log K, log H) に関するヤコビ行列 (2 x 2)"""
    require_positive(capital=capital, intangible_capital=intangible_capital)
    relations = evaluate_relations(capital, intangible_capital, params)
    return jacobian_from_relations(capital, intangible_capital, relations, params)


def jacobian_from_relations(
    capital: float,
    intangible_capital: float,
    relations: SteadyStateRelations,
    params: ModelParameters,
) -> np.ndarray:
    """導出済みの変数から (log K, log H) に関するヤコビ行列を計算する"""
    a_k, a_h, _, _ = output_elasticities(params)
    y = relations.output
    r = relations.interest_rate
    r_h = relations.intangible_rental_rate

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        # d log Y / d log K = a_k, d log Y / d log H = a_h
        dy = np.array([a_k * y, a_h * y])
        dr = np.array([a_k - 1, a_h]) * (r + 1)
        dr_h = np.array([a_k, a_h - 1]) * r_h

        # f = (1-ω) a_h Y / r, p L̄ = 1 / r
        df = (1 - params.omega) * a_h * (dy * r - y * dr) / r**2
        d_land_value = -dr / r**2

        d_eq_1 = np.array([0.0, intangible_capital]) - params.omega / params.psi * dr_h
        d_eq_2 = (1 - params.alpha + params.x) * dy - d_land_value - df - np.array([capital, 0.0])

    return np.vstack([d_eq_1, d_eq_2])
