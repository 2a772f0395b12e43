"""Redistributive Growthカスタム例外階層

前提条件違反は即座に例外として報告する。
非収束のような想定内の結果は例外ではなく戻り値で表現する。
"""


class RedistributiveGrowthError(Exception):
    """基底例外クラス"""

    pass


class SolverError(RedistributiveGrowthError):
    """ソルバー関連のエラー"""

    pass


class ConvergenceError(SolverError):
    """収束エラー

    非収束の解を呼び出し側が明示的に拒否した場合に発生。
    """

    pass


class ValidationError(RedistributiveGrowthError):
    """入力バリデーションエラー"""

    pass


class ParameterValidationError(ValidationError):
    """パラメータ値が有効範囲外のエラー"""

    pass


class NonPositiveInputError(ValidationError):
    """生産要素に非正の値が渡されたエラー

    Cobb-Douglas型生産関数は正の入力に対してのみ定義される。
    """

    pass


class InvalidInitialGuessError(ValidationError):
    """ソルバー初期値が経済学的に無効なエラー

    初期値に対応する金利が非正の場合に発生。
    """

    pass
