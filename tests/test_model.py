"""RedistributiveGrowthModelのテスト"""

import pytest

from redistributive_growth.core.exceptions import ConvergenceError
from redistributive_growth.core.model import RedistributiveGrowthModel
from redistributive_growth.parameters.constants import SolverConstants
from redistributive_growth.parameters.defaults import ModelParameters
from redistributive_growth.parameters.scenarios import INTANGIBLE_SHIFT, SAVINGS_GLUT


class TestRedistributiveGrowthModel:
    """モデル本体のテスト"""

    def test_default_parameters(self) -> None:
        assert RedistributiveGrowthModel().params == ModelParameters()

    def test_steady_state_cached(self) -> None:
        model = RedistributiveGrowthModel()
        assert model.steady_state is model.steady_state
        assert model.steady_state.converged

    def test_factor_prices_at_steady_state(self) -> None:
        model = RedistributiveGrowthModel()
        prices = model.factor_prices
        assert prices.interest_rate == pytest.approx(model.steady_state.interest_rate)
        assert prices.wage_high > prices.wage_low

    def test_counterfactual_applies_driver(self) -> None:
        model = RedistributiveGrowthModel()
        shifted = model.counterfactual(INTANGIBLE_SHIFT)
        assert shifted.params.eta == pytest.approx(0.55)
        assert model.params.eta == 0.45

    def test_compare_with_intangible_shift(self) -> None:
        model = RedistributiveGrowthModel()
        comparison = model.compare_with(model.counterfactual(INTANGIBLE_SHIFT))
        assert comparison.alternative.r < comparison.baseline.r
        assert comparison.alternative.H_HK > comparison.baseline.H_HK

    def test_savings_glut_lowers_interest_rate(self) -> None:
        """貯蓄流入は金利を押し下げる"""
        model = RedistributiveGrowthModel()
        comparison = model.compare_with(model.counterfactual(SAVINGS_GLUT))
        assert comparison.alternative.r < comparison.baseline.r

    def test_non_converged_steady_state_raises(self) -> None:
        model = RedistributiveGrowthModel(constants=SolverConstants(max_iterations=1))
        with pytest.raises(ConvergenceError):
            _ = model.steady_state
