"""生産関数と要素価格のテスト"""

import numpy as np
import pytest
import scipy.optimize

from redistributive_growth.core.exceptions import NonPositiveInputError, ValidationError
from redistributive_growth.core.prices import factor_prices, production_gradient
from redistributive_growth.core.equilibrium import evaluate_relations
from redistributive_growth.core.production import (
    cobb_douglas,
    output_elasticities,
    production,
    production_at,
)
from redistributive_growth.parameters.defaults import ModelParameters


@pytest.fixture
def params() -> ModelParameters:
    return ModelParameters()


class TestProduction:
    """生産関数のテスト"""

    def test_unit_inputs_give_productivity(self, params: ModelParameters) -> None:
        """全入力が1なら産出はAに一致する"""
        assert production(1.0, 1.0, 1.0, 1.0, params) == pytest.approx(params.A)

    def test_matches_closed_form(self, params: ModelParameters) -> None:
        k, h_cap, l, h = 0.5, 1.0, 10.0, 8.0
        a, eta = params.alpha, params.eta
        expected = (h_cap**a * h ** (1 - a)) ** eta * (k**a * l ** (1 - a)) ** (1 - eta)
        assert production(k, h_cap, l, h, params) == pytest.approx(expected)

    def test_unchecked_formula_matches_production(self, params: ModelParameters) -> None:
        expected = production(0.4, 0.7, 10.0, 8.0, params)
        assert cobb_douglas(0.4, 0.7, 10.0, 8.0, params) == expected

    def test_relations_use_same_output(self, params: ModelParameters) -> None:
        """均衡条件の Y は生産関数と一致する"""
        relations = evaluate_relations(0.4, 0.7, params)
        assert relations.output == pytest.approx(production_at(0.4, 0.7, params), rel=1e-14)

    def test_constant_returns_to_scale(self, params: ModelParameters) -> None:
        """全入力を2倍にすると産出も2倍"""
        base = production(0.4, 0.7, 10.0, 8.0, params)
        doubled = production(0.8, 1.4, 20.0, 16.0, params)
        assert doubled == pytest.approx(2 * base)

    def test_production_at_uses_inelastic_labor(self, params: ModelParameters) -> None:
        l, h = params.labor_supplies
        assert l == pytest.approx(10.0)
        assert h == pytest.approx(8.0)
        assert production_at(0.5, 1.0, params) == pytest.approx(production(0.5, 1.0, l, h, params))

    def test_elasticities_sum_to_one(self, params: ModelParameters) -> None:
        assert sum(output_elasticities(params)) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "inputs",
        [
            (0.0, 1.0, 1.0, 1.0),
            (1.0, -0.5, 1.0, 1.0),
            (1.0, 1.0, 0.0, 1.0),
            (1.0, 1.0, 1.0, -2.0),
            (float("nan"), 1.0, 1.0, 1.0),
            (float("inf"), 1.0, 1.0, 1.0),
        ],
    )
    def test_non_positive_inputs_rejected(
        self, params: ModelParameters, inputs: tuple[float, float, float, float]
    ) -> None:
        """非正・非有限の入力はNonPositiveInputError"""
        with pytest.raises(NonPositiveInputError):
            production(*inputs, params)

    def test_non_positive_error_is_validation_error(self, params: ModelParameters) -> None:
        with pytest.raises(ValidationError):
            production_at(-1.0, 1.0, params)


class TestFactorPrices:
    """要素価格のテスト"""

    @pytest.mark.parametrize(
        ("capital", "intangible_capital"),
        [(0.4, 1.0), (0.5, 1.0), (0.01, 0.01), (3.0, 0.2), (10.0, 25.0)],
    )
    def test_euler_identity(self, capital: float, intangible_capital: float) -> None:
        """収穫一定のため産出は要素所得の合計に一致する"""
        prices = factor_prices(capital, intangible_capital, ModelParameters())
        assert prices.accounting_residual == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("eta", [0.0, 0.3, 0.55, 1.0])
    def test_euler_identity_across_eta(self, eta: float) -> None:
        params = ModelParameters(eta=eta, A=2.5)
        prices = factor_prices(0.7, 1.3, params)
        assert prices.accounting_residual == pytest.approx(0.0, abs=1e-12)

    def test_gradient_matches_finite_differences(self, params: ModelParameters) -> None:
        """閉形式の勾配が数値微分と一致する"""
        x = np.array([0.5, 1.0, 10.0, 8.0])
        analytic = production_gradient(*x, params)
        numeric = scipy.optimize.approx_fprime(x, lambda v: production(*v, params), 1e-7)
        np.testing.assert_allclose(analytic, numeric, rtol=1e-5)

    def test_price_fields(self, params: ModelParameters) -> None:
        prices = factor_prices(0.5, 1.0, params)
        y = production_at(0.5, 1.0, params)
        assert prices.output == pytest.approx(y)
        expected_gross = params.alpha * (1 - params.eta) * y / 0.5
        assert prices.gross_interest_rate == pytest.approx(expected_gross)
        assert prices.interest_rate == pytest.approx(prices.gross_interest_rate - 1)
        assert prices.intangible_rental_rate == pytest.approx(params.alpha * params.eta * y / 1.0)

    def test_wage_ratio_depends_only_on_eta_and_labor(self, params: ModelParameters) -> None:
        """q/w = η/(1-η) × l/h"""
        l, h = params.labor_supplies
        expected = params.eta / (1 - params.eta) * l / h
        assert factor_prices(0.5, 1.0, params).wage_ratio == pytest.approx(expected)
        assert factor_prices(2.0, 0.3, params).wage_ratio == pytest.approx(expected)

    def test_non_positive_capital_rejected(self, params: ModelParameters) -> None:
        with pytest.raises(NonPositiveInputError):
            factor_prices(0.0, 1.0, params)
