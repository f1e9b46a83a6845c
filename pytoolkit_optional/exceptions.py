"""Optionalの誤用を通知する例外クラス群。"""


class OptionalError(Exception):
    """Optionalの誤用を表す例外の基底クラス。"""

    default_message = "Invalid use of Optional"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NullPointerError(OptionalError, ValueError):
    """値が必須の箇所にNoneが渡されたときに送出される。"""

    default_message = "Value must not be None"


class NoSuchElementError(OptionalError, LookupError):
    """空のOptionalから値を取り出そうとしたときに送出される。"""

    default_message = "No value present"
