"""Operating on `typing.Iterable`s of `optbox.Optional`."""

from typing import Iterable, Iterator, TypeVar

from more_itertools import first_true, flatten

from optbox.optional import Optional

T = TypeVar("T")


def present_values(options: Iterable[Optional[T]]) -> Iterator[T]:
    """Lazily unwrap the present values of `options`, in order, skipping the
    empty ones.

    ```python
    >>> options = [
    ...     Optional.of_nullable("one"),
    ...     Optional.empty(),
    ...     Optional.of("two"),
    ...     Optional.of_nullable(None),
    ...     Optional.of("three"),
    ... ]
    >>> list(present_values(options))
    ['one', 'two', 'three']

    ```
    """
    return flatten(option.stream() for option in options)


def present_list(options: Iterable[Optional[T]]) -> list[T]:
    """Just `present_values`, but as a `list` instead of an iterator."""
    return list(present_values(options))


def first_present(options: Iterable[Optional[T]]) -> Optional[T]:
    """The first present `Optional` in `options`, or an empty one. Stops
    pulling from `options` as soon as it finds one.

    ```python
    >>> first_present([Optional.empty(), Optional.of(2), Optional.of(3)])
    Optional.of(2)

    >>> first_present([])
    Optional.empty()

    ```
    """
    return first_true(options, Optional.empty(), Optional.is_present)
