from textwrap import dedent
from typing import Any, Callable

from . import txt


class _ValueTypeError(TypeError):
    """Common ground for errors that complain about a value being the wrong
    type. Subclasses provide a `TEMPLATE` with `{type}` and `{value}` slots,
    plus whatever else they pass to `_render`.
    """

    TEMPLATE: str

    expected_type: Any
    value: Any

    def __init__(self, expected_type: Any, value: Any, **fields: str):
        self.expected_type = expected_type
        self.value = value
        super().__init__(self._render(**fields))

    def _render(self, **fields: str) -> str:
        return self.TEMPLATE.format(
            expected_type=txt.fmt(self.expected_type),
            type=txt.fmt_type_of(self.value),
            value=txt.fmt_pretty(self.value),
            **fields,
        )


class ArgTypeError(_ValueTypeError):
    """An argument was not what it needed to be.

    ##### Examples #####

    ```python
    >>> error = ArgTypeError("supplier", "callable", 42)
    >>> error.name
    'supplier'
    >>> error.value
    42

    ```
    """

    TEMPLATE = dedent(
        """\
        Expected `{name}` to be `{expected_type}`.

        Given `{type}`:

        {value}
        """
    )

    name: str

    def __init__(self, name: str, expected_type: Any, value: Any):
        self.name = name
        super().__init__(expected_type, value, name=name)


class ReturnTypeError(_ValueTypeError):
    """A callable handed to us gave back the wrong kind of thing, like a
    `flat_map` transform that returns a bare value instead of an `Optional`.

    `when`, if given, describes the circumstance and is tacked on to the first
    line of the message.
    """

    TEMPLATE = dedent(
        """\
        Expected `{function}` to return `{expected_type}`{when}.

        Received `{type}`:

        {value}
        """
    )

    function: Callable
    when: str | None

    def __init__(
        self,
        function: Callable,
        expected_type: Any,
        return_value: object,
        when: str | None = None,
    ):
        self.function = function
        self.when = when
        super().__init__(
            expected_type,
            return_value,
            function=txt.fmt(function),
            when="" if when is None else f" when {when}",
        )

    @property
    def return_value(self) -> object:
        return self.value
