"""
値の有無を表現するコンテナ型のためのモジュール。

Noneチェックを呼び出し側に散らばらせる代わりに、値がある状態と空の状態を
Optionalで表現し、map・filter・flat_mapなどのコンビネータで操作する。
"""

from dataclasses import InitVar, dataclass
from typing import Callable, Final, Generic, TypeVar, cast

from .exceptions import NoSuchElementError, NullPointerError

T = TypeVar("T")
U = TypeVar("U")


class _Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY: Final = _Empty()
_FACTORY_KEY: Final = object()


@dataclass(frozen=True, eq=False, repr=False)
class Optional(Generic[T]):
    """
    0個または1個の値を保持する不変コンテナ。

    インスタンスは empty / of / of_nullable のいずれかでのみ生成する。
    直接のインスタンス化はTypeErrorとなる。
    """

    _value: T | _Empty
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        if _key is not _FACTORY_KEY:
            raise TypeError(
                "Optional cannot be instantiated directly; "
                "use Optional.empty, Optional.of or Optional.of_nullable"
            )

    @classmethod
    def empty(cls) -> "Optional[T]":
        return cast("Optional[T]", _EMPTY_OPTIONAL)

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        値を保持するOptionalを生成する。

        Args:
            value: 保持する値

        Raises:
            NullPointerError: valueがNoneの場合
        """
        if value is None:
            raise NullPointerError()
        return cls(value, _FACTORY_KEY)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        """valueがNoneなら空のOptionalを、そうでなければ値を保持するOptionalを返す。"""
        if value is None:
            return cls.empty()
        return cls(value, _FACTORY_KEY)

    def is_present(self) -> bool:
        return not isinstance(self._value, _Empty)

    def is_empty(self) -> bool:
        return isinstance(self._value, _Empty)

    def get(self) -> T:
        if isinstance(self._value, _Empty):
            raise NoSuchElementError()
        return self._value

    def if_present(self, action: Callable[[T], object]) -> None:
        if not isinstance(self._value, _Empty):
            action(self._value)

    def if_present_or_else(
        self,
        action: Callable[[T], object],
        empty_action: Callable[[], object],
    ) -> None:
        """値があればactionを、空であればempty_actionを、どちらか一方だけ呼び出す。"""
        if isinstance(self._value, _Empty):
            empty_action()
        else:
            action(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        if isinstance(self._value, _Empty):
            return self
        if predicate(self._value):
            return self
        return Optional.empty()

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        """
        保持する値にmapperを適用した結果をOptionalで包んで返す。

        mapperがNoneを返した場合は空のOptionalとなる。
        空のOptionalではmapperは呼び出されない。
        """
        if isinstance(self._value, _Empty):
            return Optional.empty()
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        """
        保持する値にmapperを適用し、その結果のOptionalをそのまま返す。

        Raises:
            TypeError: mapperがOptional以外を返した場合
        """
        if isinstance(self._value, _Empty):
            return Optional.empty()
        result = mapper(self._value)
        if not isinstance(result, Optional):
            raise TypeError(
                f"flat_map mapper must return an Optional, got {type(result).__name__}"
            )
        return result

    def or_(self, supplier: Callable[[], "Optional[T]"]) -> "Optional[T]":
        """
        値があれば同じ値を持つOptionalを、空であればsupplierの結果を返す。

        Raises:
            TypeError: supplierがOptional以外を返した場合
        """
        if not isinstance(self._value, _Empty):
            return Optional.of(self._value)
        result = supplier()
        if not isinstance(result, Optional):
            raise TypeError(
                f"or_ supplier must return an Optional, got {type(result).__name__}"
            )
        return result

    def or_else(self, other: U) -> T | U:
        if isinstance(self._value, _Empty):
            return other
        return self._value

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        if isinstance(self._value, _Empty):
            return supplier()
        return self._value

    def or_else_throw(
        self,
        exception_supplier: (
            Callable[[], BaseException | type[BaseException]] | None
        ) = None,
    ) -> T:
        """
        値があれば返し、空であれば例外を送出する。

        Args:
            exception_supplier: 送出する例外(または例外クラス)を返す関数。
                省略時、あるいは例外以外を返した場合はNoSuchElementErrorを送出する。
        """
        if not isinstance(self._value, _Empty):
            return self._value

        if exception_supplier is None:
            raise NoSuchElementError()

        exception = exception_supplier()
        if isinstance(exception, BaseException):
            raise exception
        if isinstance(exception, type) and issubclass(exception, BaseException):
            raise exception
        raise NoSuchElementError()

    def equals(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return False
        value = self.or_else(None)
        other_value = other.or_else(None)
        return value is other_value or bool(value == other_value)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.or_else(None))

    def __repr__(self) -> str:
        if isinstance(self._value, _Empty):
            return "Optional.empty"
        return f"Optional[{self._value!r}]"


_EMPTY_OPTIONAL: Final[Optional[object]] = Optional(_EMPTY, _FACTORY_KEY)
