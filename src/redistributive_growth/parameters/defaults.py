"""モデルパラメータのデフォルト値

Döttling and Perotti (2019) "Redistributive Growth" のカリブレーションを
わずかに変更したもの。住宅からの効用は v(L) = log(L)。
"""

import math
from dataclasses import dataclass, fields, replace

from redistributive_growth.core.exceptions import ParameterValidationError


@dataclass(frozen=True)
class ModelParameters:
    """Redistributive Growthモデルのパラメータ

    Attributes:
        L_bar: 土地供給 L̄
        phi: 高技能労働者の人口比率 ϕ
        h_tilde: 高技能労働の非弾力的供給 h̃
        l_tilde: 低技能労働の非弾力的供給 l̃
        alpha: 資本シェア α
        eta: 無形資本と高技能労働の相対生産性 η
        omega: イノベーターが「奪える」無形資本の割合 ω
        psi: 無形資本の生産コスト ψ
        A: 全要素生産性
        x: 外生的な貯蓄流入（グローバル貯蓄過剰）
    """

    L_bar: float = 1.0
    phi: float = 0.2
    h_tilde: float = 8 / 0.2
    l_tilde: float = 10 / (1 - 0.2)
    alpha: float = 0.33
    eta: float = 0.45
    omega: float = 0.9
    psi: float = 1.0
    A: float = 1.0
    x: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ParameterValidationError(f"{f.name} は有限値である必要があります: {value}")

        for name in ("L_bar", "h_tilde", "l_tilde", "psi", "A"):
            if getattr(self, name) <= 0:
                raise ParameterValidationError(
                    f"{name} は正である必要があります: {getattr(self, name)}"
                )

        if not 0 < self.phi < 1:
            raise ParameterValidationError(f"phi は (0, 1) の範囲である必要があります: {self.phi}")
        if not 0 < self.alpha < 1:
            raise ParameterValidationError(
                f"alpha は (0, 1) の範囲である必要があります: {self.alpha}"
            )
        if not 0 <= self.eta <= 1:
            raise ParameterValidationError(f"eta は [0, 1] の範囲である必要があります: {self.eta}")
        if not 0 <= self.omega <= 1:
            raise ParameterValidationError(
                f"omega は [0, 1] の範囲である必要があります: {self.omega}"
            )

    @property
    def low_skill_labor(self) -> float:
        """低技能労働 l = (1-ϕ) l̃"""
        return (1 - self.phi) * self.l_tilde

    @property
    def high_skill_labor(self) -> float:
        """高技能労働 h = ϕ h̃"""
        return self.phi * self.h_tilde

    @property
    def labor_supplies(self) -> tuple[float, float]:
        """非弾力的な労働供給 (l, h)"""
        return self.low_skill_labor, self.high_skill_labor

    def with_updates(self, **changes: float) -> "ModelParameters":
        """一部のパラメータを変更した新しいインスタンスを返す"""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ParameterValidationError(f"不明なパラメータ: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# パラメータの説明（CLI表示用）
PARAMETER_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    "L_bar": ("L̄", "土地供給"),
    "phi": ("ϕ", "高技能労働者の比率"),
    "h_tilde": ("h̃", "高技能労働の供給"),
    "l_tilde": ("l̃", "低技能労働の供給"),
    "alpha": ("α", "資本シェア"),
    "eta": ("η", "無形資本の相対生産性"),
    "omega": ("ω", "イノベーターの交渉力"),
    "psi": ("ψ", "無形資本の生産コスト"),
    "A": ("A", "全要素生産性"),
    "x": ("x", "外生的な貯蓄流入"),
}
