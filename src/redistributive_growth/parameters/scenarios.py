"""成長要因シナリオ

無形資本へのシフト (η↑) 以外にも、長期トレンドを説明しうる成長要因がある。
各要因はベースラインのパラメータに対する変更として表現し、
2つの定常状態を比較することで、どのトレンドを再現できるかを調べる。
"""

from dataclasses import dataclass

from redistributive_growth.core.exceptions import ValidationError
from redistributive_growth.parameters.defaults import ModelParameters


@dataclass(frozen=True)
class GrowthDriver:
    """ベースラインに対する相対的なパラメータ変更

    Attributes:
        name: シナリオ名
        description: 説明
        shifts: ベースライン値に加算する変化分 (名前, 値) の組
        overrides: ベースライン値を置き換える (名前, 値) の組
    """

    name: str
    description: str
    shifts: tuple[tuple[str, float], ...] = ()
    overrides: tuple[tuple[str, float], ...] = ()

    def apply(self, baseline: ModelParameters) -> ModelParameters:
        """ベースラインに変更を適用したパラメータを返す"""
        current = baseline.to_dict()
        changes = {name: current[name] + delta for name, delta in self.shifts}
        changes.update(dict(self.overrides))
        return baseline.with_updates(**changes)

    def __str__(self) -> str:
        parts = [f"{name} {delta:+g}" for name, delta in self.shifts]
        parts += [f"{name} = {value:g}" for name, value in self.overrides]
        return f"{self.description} ({', '.join(parts)})"


INTANGIBLE_SHIFT = GrowthDriver(
    name="intangible_shift",
    description="無形資本への技術シフト η↑",
    shifts=(("eta", 0.1),),
)

EASIER_INNOVATION = GrowthDriver(
    name="easier_innovation",
    description="イノベーションの容易化 ψ↓",
    shifts=(("psi", -0.1),),
)

EDUCATION = GrowthDriver(
    name="education",
    description="高学歴労働者の増加 ϕ↑",
    shifts=(("phi", 0.1),),
)

CAPITAL_PRODUCTIVITY = GrowthDriver(
    name="capital_productivity",
    description="労働に対する資本の生産性上昇 α↑",
    shifts=(("alpha", 0.1),),
)

BARGAINING_POWER = GrowthDriver(
    name="bargaining_power",
    description="既存企業に対するイノベーターの交渉力上昇 ω↑",
    shifts=(("omega", 0.05),),
)

SAVINGS_GLUT = GrowthDriver(
    name="savings_glut",
    description="新興国からの資本流入（グローバル貯蓄過剰）x↑",
    overrides=(("x", 0.1),),
)

GROWTH_DRIVERS: dict[str, GrowthDriver] = {
    driver.name: driver
    for driver in (
        INTANGIBLE_SHIFT,
        EASIER_INNOVATION,
        EDUCATION,
        CAPITAL_PRODUCTIVITY,
        BARGAINING_POWER,
        SAVINGS_GLUT,
    )
}


def get_growth_driver(name: str) -> GrowthDriver:
    """名前から成長要因を取得する"""
    try:
        return GROWTH_DRIVERS[name]
    except KeyError:
        available = ", ".join(GROWTH_DRIVERS)
        raise ValidationError(f"不明な成長要因 '{name}' (利用可能: {available})") from None
