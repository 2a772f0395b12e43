"""CLIメインエントリーポイント"""

from typing import Annotated

import typer
from rich.console import Console

from redistributive_growth import __version__
from redistributive_growth.cli.commands import (
    compare_command,
    drivers_command,
    parameters_command,
    steady_state_command,
)

app = typer.Typer(
    name="redistributive-growth",
    help="Redistributive Growth 定常状態ソルバー",
    no_args_is_help=True,
)
console = Console()

ParamOption = Annotated[
    list[str] | None,
    typer.Option("--param", "-P", help="パラメータの上書き（例: --param eta=0.55）"),
]


@app.command("parameters")
def parameters(overrides: ParamOption = None) -> None:
    """モデルパラメータを表示"""
    parameters_command(overrides)


@app.command("steady-state")
def steady_state(
    overrides: ParamOption = None,
    initial_capital: Annotated[
        float | None,
        typer.Option("--k0", help="物的資本 K の初期値"),
    ] = None,
    initial_intangible_capital: Annotated[
        float | None,
        typer.Option("--h0", help="無形資本 H の初期値"),
    ] = None,
) -> None:
    """定常状態を計算して表示

    例:
        redistributive-growth steady-state
        redistributive-growth steady-state --param eta=0.55 --k0 0.4 --h0 1.0
    """
    steady_state_command(overrides, initial_capital, initial_intangible_capital)


@app.command("compare")
def compare(
    driver: Annotated[
        str,
        typer.Argument(
            help="成長要因: intangible_shift, easier_innovation, education, "
            "capital_productivity, bargaining_power, savings_glut"
        ),
    ] = "intangible_shift",
    overrides: ParamOption = None,
) -> None:
    """ベースラインと成長要因シナリオの長期トレンドを比較

    例:
        redistributive-growth compare intangible_shift
        redistributive-growth compare savings_glut
    """
    compare_command(driver, overrides)


@app.command("drivers")
def drivers() -> None:
    """成長要因の一覧を表示"""
    drivers_command()


@app.command("version")
def version() -> None:
    """バージョン情報を表示"""
    console.print(f"redistributive-growth version {__version__}")


if __name__ == "__main__":
    app()
