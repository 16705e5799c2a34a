from __future__ import annotations
from typing import (
    Callable,
    Concatenate,
    Generic,
    ParamSpec,
    TypeVar,
)
from contextvars import ContextVar, Token


T = TypeVar("T")
TParams = ParamSpec("TParams")


class DerivingContextVar(Generic[TParams, T]):
    """Wraps a `contextvars.ContextVar` so that calling it gives you a context
    manager that swaps in a value _derived_ from the current one for the
    duration of a `with` block.

    ##### Examples #####

    ```python
    >>> depth = DerivingContextVar(
    ...     "depth", lambda current, by=1: current + by, 0
    ... )

    >>> with depth() as d1:
    ...     with depth(by=10) as d2:
    ...         (d1, d2, depth.get())
    (1, 11, 11)

    >>> depth.get()
    0

    ```
    """

    class _Swap(Generic[T]):
        __slots__ = ["_var", "_value", "_token"]

        _var: ContextVar[T]
        _value: T
        _token: Token | None

        def __init__(self, var: ContextVar[T], value: T):
            self._var = var
            self._value = value
            self._token = None

        def __enter__(self) -> T:
            if self._token is not None:
                raise RuntimeError("can not re-enter context")

            self._token = self._var.set(self._value)

            return self._value

        def __exit__(self, exc_type, exc_value, traceback) -> None:
            if self._token is None:
                raise RuntimeError("can not __exit__ without __enter__ first")

            self._var.reset(self._token)

    _derive: Callable[Concatenate[T, TParams], T]
    _var: ContextVar[T]
    _default: T

    def __init__(
        self,
        name: str,
        derive: Callable[Concatenate[T, TParams], T],
        default: T,
    ):
        self._derive = derive
        self._var = ContextVar(name, default=default)
        self._default = default

    @property
    def default(self) -> T:
        return self._default

    def get(self) -> T:
        return self._var.get()

    def __call__(
        self, *args: TParams.args, **kwds: TParams.kwargs
    ) -> DerivingContextVar._Swap[T]:
        return self._Swap(self._var, self._derive(self.get(), *args, **kwds))
