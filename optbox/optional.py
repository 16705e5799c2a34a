"""The `Optional` container: zero or one value, and a bunch of ways to deal
with the "zero" case without sprinkling `is None` checks everywhere.

`None` is what "nothing" looks like in Python, so that's what counts as
absent. A present `Optional` never holds `None`; there is exactly one way to be
empty, and it's `Optional.empty()`.

##### Examples #####

```python
>>> Optional.of("test").map(str.upper)
Optional.of('TEST')

>>> Optional.of_nullable(None).map(str.upper).or_else("unknown")
'unknown'

>>> [*Optional.of(1), *Optional.empty(), *Optional.of(2)]
[1, 2]

```
"""

from __future__ import annotations
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    NoReturn,
    TypeVar,
    final,
)

from rich.repr import RichReprResult

from optbox.err import (
    ArgTypeError,
    InvalidValueError,
    NoValueError,
    ReturnTypeError,
)

T = TypeVar("T")
U = TypeVar("U")


def _check_callable(name: str, fn: object) -> None:
    if not callable(fn):
        raise ArgTypeError(name, Callable, fn)


def _check_optional_return(fn: Callable, result: object) -> Optional[Any]:
    if not isinstance(result, Optional):
        raise ReturnTypeError(fn, Optional, result)
    return result  # type: ignore[return-value]


@final
class Optional(Generic[T]):
    """Holds either one present value, or nothing.

    Don't construct directly; use `Optional.of`, `Optional.of_nullable` or
    `Optional.empty` (also exported as `optbox.of`, `optbox.of_nullable` and
    `optbox.empty`).

    Instances are immutable. Every combinator hands back a new `Optional` (or
    the same one, when nothing would change), and there is only ever one empty
    instance.
    """

    __slots__ = ("_value",)

    _EMPTY: Optional[Any]

    _value: T | None

    def __init__(self, value: T | None, /):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(
            f"{type(self).__name__} is immutable, can't set {name!r}"
        )

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(
            f"{type(self).__name__} is immutable, can't delete {name!r}"
        )

    # Construction
    # ========================================================================

    @classmethod
    def empty(cls) -> Optional[T]:
        """
        >>> Optional.empty() is Optional.empty()
        True
        """
        return cls._EMPTY

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """A present `Optional` around `value`, which must not be `None`.

        ```python
        >>> Optional.of("test").get()
        'test'

        >>> Optional.of(None)
        Traceback (most recent call last):
            ...
        optbox.err.InvalidValueError: can not make a present Optional of None

        ```
        """
        if value is None:
            raise InvalidValueError()
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Present if `value` is not `None`, empty otherwise. Never raises."""
        if value is None:
            return cls._EMPTY
        return cls(value)

    # Query
    # ========================================================================

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def __bool__(self) -> bool:
        return self._value is not None

    # Extraction
    # ========================================================================

    def get(self) -> T:
        """The value, or raise `optbox.err.NoValueError` if there isn't one."""
        if self._value is None:
            raise NoValueError()
        return self._value

    def or_else(self, default: U) -> T | U:
        """The value, or `default`.

        `default` is evaluated by the caller no matter what. If computing it is
        expensive (or has side effects) use `or_else_get`.
        """
        if self._value is None:
            return default
        return self._value

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        """The value, or the result of calling `supplier` (only when empty).

        ```python
        >>> Optional.of("value").or_else_get(lambda: 1 / 0)
        'value'

        >>> Optional.empty().or_else_get(lambda: "default")
        'default'

        ```
        """
        if self._value is None:
            return supplier()
        return self._value

    def or_else_throw(
        self, error_factory: Callable[[], BaseException] | None = None
    ) -> T:
        """The value, or raise the error that `error_factory` makes.

        An exception class is a fine `error_factory`, since calling one makes
        an instance. Without a factory this is the same as `get`.

        ```python
        >>> Optional.empty().or_else_throw(KeyError)
        Traceback (most recent call last):
            ...
        KeyError

        ```
        """
        if self._value is not None:
            return self._value
        if error_factory is None:
            raise NoValueError()
        error = error_factory()
        if not isinstance(error, BaseException):
            raise ReturnTypeError(
                error_factory, BaseException, error, when="Optional is empty"
            )
        raise error

    # Conditional Action
    # ========================================================================

    def if_present(self, action: Callable[[T], Any]) -> None:
        if self._value is not None:
            action(self._value)

    def if_present_or_else(
        self,
        action: Callable[[T], Any],
        absent_action: Callable[[], Any],
    ) -> None:
        """Call `action` with the value if there is one, otherwise call
        `absent_action` with no arguments. Exactly one of them gets called.
        """
        if self._value is not None:
            action(self._value)
        else:
            absent_action()

    # Transformation
    # ========================================================================

    def filter(self, predicate: Callable[[T], Any]) -> Optional[T]:
        """This `Optional` if it's present and `predicate` likes the value,
        otherwise empty.

        Handy for turning "blank" values into empty ones:

        ```python
        >>> Optional.of_nullable("").filter(lambda s: s != "")
        Optional.empty()

        ```
        """
        _check_callable("predicate", predicate)
        if self._value is None or predicate(self._value):
            return self
        return self._EMPTY

    def map(self, transform: Callable[[T], U | None]) -> Optional[U]:
        """Apply `transform` to the value, if any. A `None` result comes back
        as empty.

        ```python
        >>> Optional.of({"name": "Harry"}).map(lambda d: d.get("age"))
        Optional.empty()

        ```
        """
        _check_callable("transform", transform)
        if self._value is None:
            return self._EMPTY
        return Optional.of_nullable(transform(self._value))

    def flat_map(self, transform: Callable[[T], Optional[U]]) -> Optional[U]:
        """Like `map`, but for a `transform` that already returns an
        `Optional`, which is handed back as-is (not wrapped again).

        `transform` returning anything that isn't an `Optional` (`None`
        included) raises `optbox.err.ReturnTypeError`.
        """
        _check_callable("transform", transform)
        if self._value is None:
            return self._EMPTY
        return _check_optional_return(transform, transform(self._value))

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """This `Optional` if present, otherwise the one `supplier` makes
        (`supplier` is only called when empty). Same return checks as
        `flat_map`.

        ```python
        >>> Optional.empty().or_(lambda: Optional.of("fallback"))
        Optional.of('fallback')

        ```
        """
        _check_callable("supplier", supplier)
        if self._value is not None:
            return self
        return _check_optional_return(supplier, supplier())

    # Sequence Conversion
    # ========================================================================

    def stream(self) -> Iterator[T]:
        """A lazy iterator over zero or one element.

        ```python
        >>> from more_itertools import flatten
        >>> options = [Optional.of("one"), Optional.empty(), Optional.of("two")]
        >>> list(flatten(o.stream() for o in options))
        ['one', 'two']

        ```
        """
        if self._value is not None:
            yield self._value

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    # Value Semantics
    # ========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        if self._value is None:
            return 0
        return hash(self._value)

    def __str__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional[{self._value}]"

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty()"
        return f"Optional.of({self._value!r})"

    def __reduce__(self):
        return (Optional.of_nullable, (self._value,))

    def __rich_repr__(self) -> RichReprResult:
        if self._value is not None:
            yield self._value


Optional._EMPTY = Optional(None)
