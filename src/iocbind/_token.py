from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, NoReturn, Protocol, TypeVar, overload


T = TypeVar("T")


class Token(Generic[T]):
    """Opaque identifier for a binding.

    Every instance is unique: two tokens built with the same description are
    still different keys, so modules can declare their own identifiers without
    colliding. The type parameter only informs static type checkers about what
    ``Container.get`` returns for this token.

    Copies are the token itself. Tokens cannot be pickled, since a new process
    could never recover the same identity.

    Example:
      DATABASE: Token[Database] = Token("database")

    """

    __slots__ = ("_description",)

    def __init__(self, description: str = "") -> None:
        object.__setattr__(self, "_description", description)

    @property
    def description(self) -> str:
        return self._description

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __copy__(self) -> Token[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Token[T]:
        return self

    def __reduce__(self) -> NoReturn:
        msg = f"{self!r} cannot be pickled: tokens are compared by identity"
        raise TypeError(msg)

    def __repr__(self) -> str:
        return f"Token({self._description!r})"


# Strings compare by value, tokens by identity.
ID = str | Token[Any]


class Inject(Protocol):
    """Callable handed to factories; same contract as ``Container.get``."""

    @overload
    def __call__(self, id: Token[T], /) -> T: ...  # noqa: A002

    @overload
    def __call__(self, id: str, /) -> Any: ...  # noqa: A002

    def __call__(self, id: ID, /) -> Any: ...  # noqa: A002


FactoryOf = Callable[[Inject], T]
