"""CLIコマンド実装"""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from redistributive_growth.analysis.trends import TREND_LABELS, annualized_interest_rate
from redistributive_growth.core.exceptions import (
    ParameterValidationError,
    RedistributiveGrowthError,
    SolverError,
    ValidationError,
)
from redistributive_growth.core.model import RedistributiveGrowthModel
from redistributive_growth.parameters.defaults import PARAMETER_DESCRIPTIONS, ModelParameters
from redistributive_growth.parameters.scenarios import GROWTH_DRIVERS, get_growth_driver

console = Console()

F = TypeVar("F", bound=Callable[..., None])


def handle_rg_error(func: F) -> F:
    """CLI用エラーハンドリングデコレータ

    パッケージの例外を捕捉し、ユーザーフレンドリーなエラーメッセージを表示する。
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> None:
        try:
            func(*args, **kwargs)
        except ValidationError as e:
            console.print(f"[red]入力エラー: {e}[/red]")
            raise typer.Exit(1) from e
        except SolverError as e:
            console.print(f"[red]計算エラー: {e}[/red]")
            raise typer.Exit(2) from e
        except RedistributiveGrowthError as e:
            console.print(f"[red]エラー: {e}[/red]")
            raise typer.Exit(3) from e

    return wrapper  # type: ignore[return-value]


def parse_overrides(overrides: list[str] | None) -> dict[str, float]:
    """「name=value」形式のパラメータ指定を辞書に変換する"""
    changes: dict[str, float] = {}
    for item in overrides or []:
        name, sep, raw_value = item.partition("=")
        if not sep:
            raise ParameterValidationError(f"パラメータ指定は name=value 形式です: '{item}'")
        try:
            changes[name.strip()] = float(raw_value)
        except ValueError:
            raise ParameterValidationError(f"数値に変換できません: '{item}'") from None
    return changes


def build_parameters(overrides: list[str] | None) -> ModelParameters:
    return ModelParameters().with_updates(**parse_overrides(overrides))


@handle_rg_error
def parameters_command(overrides: list[str] | None = None) -> None:
    """パラメータを表示"""
    params = build_parameters(overrides)

    console.print()
    console.print(Panel("[bold]モデルパラメータ[/bold]", title="Redistributive Growth"))

    table = Table(title="パラメータ")
    table.add_column("名前", style="cyan")
    table.add_column("記号", style="magenta")
    table.add_column("値", style="green")
    table.add_column("説明", style="yellow")

    for name, value in params.to_dict().items():
        symbol, description = PARAMETER_DESCRIPTIONS[name]
        table.add_row(name, symbol, f"{value:g}", description)

    console.print(table)

    l, h = params.labor_supplies
    console.print(f"労働供給: l = (1-ϕ)l̃ = {l:.4f}, h = ϕh̃ = {h:.4f}")


@handle_rg_error
def steady_state_command(
    overrides: list[str] | None = None,
    initial_capital: float | None = None,
    initial_intangible_capital: float | None = None,
) -> None:
    """定常状態を表示"""
    model = RedistributiveGrowthModel(build_parameters(overrides))
    solution = model.compute_steady_state(initial_capital, initial_intangible_capital)

    console.print()
    console.print(Panel("[bold]定常状態[/bold]", title="Redistributive Growth"))

    status = "[green]収束[/green]" if solution.converged else "[red]非収束[/red]"
    console.print(
        f"ソルバー: {status} (目的関数値 {solution.objective_value:.2e}, "
        f"反復 {solution.iterations})"
    )
    solution.require_converged()

    relations = solution.relations
    prices = solution.prices

    table1 = Table(title="ストック・産出")
    table1.add_column("変数", style="cyan")
    table1.add_column("値", style="green")
    table1.add_row("物的資本（K）", f"{solution.capital:.6f}")
    table1.add_row("無形資本（H）", f"{solution.intangible_capital:.6f}")
    table1.add_row("産出（Y）", f"{relations.output:.6f}")
    console.print(table1)

    table2 = Table(title="価格・金利")
    table2.add_column("変数", style="cyan")
    table2.add_column("値", style="green")
    table2.add_row("金利（r）", f"{relations.interest_rate * 100:.2f}%")
    table2.add_row(
        "年率換算金利",
        f"{annualized_interest_rate(relations.interest_rate) * 100:.2f}%",
    )
    table2.add_row("無形資本レンタル率（R_H）", f"{relations.intangible_rental_rate:.6f}")
    table2.add_row("株価（f）", f"{relations.share_price:.6f}")
    table2.add_row("地価（p）", f"{relations.land_price:.6f}")
    table2.add_row("低技能賃金（w）", f"{prices.wage_low:.6f}")
    table2.add_row("高技能賃金（q）", f"{prices.wage_high:.6f}")
    table2.add_row("会計恒等式の残差", f"{prices.accounting_residual:.2e}")
    console.print(table2)

    if not solution.economically_valid:
        console.print("[yellow]警告: 金利が正でない解です（初期値を見直してください）[/yellow]")


@handle_rg_error
def compare_command(driver_name: str, overrides: list[str] | None = None) -> None:
    """ベースラインと成長要因シナリオの定常状態を比較"""
    driver = get_growth_driver(driver_name)
    baseline = RedistributiveGrowthModel(build_parameters(overrides))
    alternative = baseline.counterfactual(driver)
    comparison = baseline.compare_with(alternative)

    console.print()
    console.print(
        Panel(f"[bold]長期トレンドの比較[/bold]\n{driver}", title="Redistributive Growth")
    )

    table = Table(title="定常状態の比較")
    table.add_column("変数", style="cyan")
    table.add_column("ベースライン", style="green")
    table.add_column("反実仮想", style="green")
    table.add_column("変化", style="yellow")

    for key, base_value, alt_value, direction in comparison.rows():
        table.add_row(
            TREND_LABELS.get(key, key),
            f"{base_value:.4f}",
            f"{alt_value:.4f}",
            direction.arrow,
        )

    console.print(table)


def drivers_command() -> None:
    """利用可能な成長要因を表示"""
    table = Table(title="成長要因")
    table.add_column("名前", style="cyan", no_wrap=True)
    table.add_column("内容", style="yellow")

    for name, driver in GROWTH_DRIVERS.items():
        table.add_row(name, str(driver))

    console.print(table)
