"""Reading typed values out of environment variables.

Every getter takes the `env` mapping to read from, defaulting to
`os.environ`, which makes them easy to drive from tests.
"""

from os import environ
from typing import Callable, Mapping, TypeVar, cast

from .txt import fmt

T = TypeVar("T")


class UnreachableError(RuntimeError):
    def __init__(self):
        super().__init__("This code should never be reachable")


def get_int(name: str, env: Mapping[str, str] = environ) -> int:
    """
    >>> get_int("VERBOSITY", {"VERBOSITY": " 2 "})
    2
    >>> get_int("VERBOSITY", {"VERBOSITY": ""})
    0
    >>> get_int("VERBOSITY", {})
    0
    """
    match env.get(name):
        case None | "":
            return 0
        case str(s):
            return int(s)
    raise UnreachableError()


_GETTERS: dict[type, Callable[[str, Mapping[str, str]], object]] = {
    int: get_int,
}


def get_as(name: str, as_a: type[T], env: Mapping[str, str] = environ) -> T:
    """Get env var `name` parsed as an `as_a`, which must be a type there is a
    getter for.

    ```python
    >>> get_as("VERBOSITY", int, {"VERBOSITY": "1"})
    1

    ```
    """
    if getter := _GETTERS.get(as_a):
        return cast(T, getter(name, env))
    raise TypeError(
        f"can't read env var {name} as {fmt(as_a)}; "
        f"supported types are {', '.join(t.__name__ for t in _GETTERS)}"
    )
