"""パラメータと成長要因シナリオのテスト"""

from dataclasses import FrozenInstanceError

import pytest

from redistributive_growth.core.exceptions import ParameterValidationError, ValidationError
from redistributive_growth.parameters.defaults import PARAMETER_DESCRIPTIONS, ModelParameters
from redistributive_growth.parameters.scenarios import (
    GROWTH_DRIVERS,
    GrowthDriver,
    INTANGIBLE_SHIFT,
    SAVINGS_GLUT,
    get_growth_driver,
)


class TestModelParameters:
    """ModelParametersのテスト"""

    def test_baseline_calibration(self) -> None:
        params = ModelParameters()
        assert params.L_bar == 1.0
        assert params.phi == 0.2
        assert params.h_tilde == pytest.approx(40.0)
        assert params.l_tilde == pytest.approx(12.5)
        assert params.alpha == 0.33
        assert params.eta == 0.45
        assert params.omega == 0.9
        assert params.psi == 1.0
        assert params.A == 1.0
        assert params.x == 0.0

    def test_frozen(self) -> None:
        params = ModelParameters()
        with pytest.raises(FrozenInstanceError):
            params.eta = 0.5  # type: ignore[misc]

    def test_with_updates_returns_new_instance(self) -> None:
        base = ModelParameters()
        updated = base.with_updates(eta=0.55)
        assert updated.eta == 0.55
        assert base.eta == 0.45
        assert updated.alpha == base.alpha

    def test_with_updates_unknown_field(self) -> None:
        with pytest.raises(ParameterValidationError, match="不明なパラメータ"):
            ModelParameters().with_updates(beta=0.99)

    @pytest.mark.parametrize(
        "changes",
        [
            {"phi": 0.0},
            {"phi": 1.0},
            {"alpha": 1.0},
            {"eta": -0.1},
            {"eta": 1.1},
            {"omega": 1.5},
            {"psi": 0.0},
            {"A": -1.0},
            {"L_bar": 0.0},
            {"l_tilde": -3.0},
            {"x": float("nan")},
        ],
    )
    def test_invalid_values_rejected(self, changes: dict[str, float]) -> None:
        with pytest.raises(ParameterValidationError):
            ModelParameters(**changes)

    def test_validation_error_hierarchy(self) -> None:
        with pytest.raises(ValidationError):
            ModelParameters(alpha=0.0)

    def test_descriptions_cover_all_fields(self) -> None:
        assert set(PARAMETER_DESCRIPTIONS) == set(ModelParameters().to_dict())


class TestGrowthDrivers:
    """成長要因シナリオのテスト"""

    def test_intangible_shift_raises_eta(self) -> None:
        shifted = INTANGIBLE_SHIFT.apply(ModelParameters())
        assert shifted.eta == pytest.approx(0.55)
        assert shifted.alpha == 0.33

    def test_savings_glut_sets_inflow(self) -> None:
        assert SAVINGS_GLUT.apply(ModelParameters()).x == pytest.approx(0.1)

    def test_shifts_are_relative_to_baseline(self) -> None:
        base = ModelParameters(eta=0.3)
        assert INTANGIBLE_SHIFT.apply(base).eta == pytest.approx(0.4)

    @pytest.mark.parametrize("name", list(GROWTH_DRIVERS))
    def test_all_drivers_produce_valid_parameters(self, name: str) -> None:
        driver = get_growth_driver(name)
        params = driver.apply(ModelParameters())
        assert params != ModelParameters()
        assert driver.description in str(driver)

    @pytest.mark.parametrize("name", list(GROWTH_DRIVERS))
    def test_driver_is_hashable(self, name: str) -> None:
        driver = get_growth_driver(name)
        assert hash(driver) == hash(get_growth_driver(name))
        assert {driver: name}[driver] == name

    def test_equal_drivers_share_hash(self) -> None:
        copy = GrowthDriver(
            name="intangible_shift",
            description="無形資本への技術シフト η↑",
            shifts=(("eta", 0.1),),
        )
        assert copy == INTANGIBLE_SHIFT
        assert hash(copy) == hash(INTANGIBLE_SHIFT)

    def test_unknown_driver(self) -> None:
        with pytest.raises(ValidationError, match="不明な成長要因"):
            get_growth_driver("tax_cut")
