"""Configuration for `optbox`.

Settings are declared as typed `Setting`s (only `VERBOSITY` for now).
Values resolve through a chain of `Container`s:

1.  `DEFAULTS` — the `Setting.default` of every setting.
2.  `GLOBAL` — values picked up from the environment at import time (see
    `load_env`), falling back to `DEFAULTS`.
3.  Any number of children derived with `configure`, which only live for the
    duration of a `with` block and only in the current `contextvars.Context`
    (so threads and asyncio tasks don't step on each other).

##### Examples #####

```python
>>> get(VERBOSITY)
0

>>> with configure(verbosity=2):
...     get(VERBOSITY)
2

>>> get(VERBOSITY)
0

```
"""

from __future__ import annotations
from dataclasses import dataclass
from os import environ
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, TypeVar

import splatlog
from splatlog.lib.typeguard import satisfies
from rich.repr import RichReprResult

from optbox import etc
from optbox.err import ArgTypeError

T = TypeVar("T")

LOG = splatlog.get_logger(__name__)

#: Env var names are this, upper-cased, then the setting name.
ENV_PREFIX = "optbox"


@dataclass(frozen=True)
class Setting(Generic[T]):
    name: str
    v_type: type[T]
    default: T

    @property
    def env_name(self) -> str:
        """
        >>> VERBOSITY.env_name
        'OPTBOX_VERBOSITY'
        """
        return etc.txt.as_env_name(f"{ENV_PREFIX}.{self.name}")


#: How chatty logging gets when `optbox.log.setup` is called without an
#: explicit verbosity. 0 → WARNING, 1 → INFO, 2+ → DEBUG.
VERBOSITY = Setting("verbosity", int, 0)

SETTINGS: Mapping[str, Setting[Any]] = MappingProxyType(
    {setting.name: setting for setting in (VERBOSITY,)}
)


def _satisfies(value: object, v_type: type) -> bool:
    # `True` passes as an `int`; only `bool` settings take it
    if isinstance(value, bool) and v_type is not bool:
        return False
    return satisfies(value, v_type)


def setting_for(name: str) -> Setting[Any]:
    if setting := SETTINGS.get(name):
        return setting
    raise KeyError(
        f"no setting named {name!r}; known settings are "
        + ", ".join(SETTINGS)
    )


class Container:
    """Holds values for some (or none) of the `SETTINGS`, deferring to a
    `parent` for the rest. Values are checked against their `Setting.v_type`
    on the way in, so reads never have to.

    Immutable once built; use `derive` to layer changes on top.
    """

    _log = splatlog.LoggerProperty()

    _parent: Container | None
    _values: Mapping[str, Any]
    _meta: Mapping[str, Any]

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        parent: Container | None = None,
        **meta: Any,
    ):
        checked = {}
        for name, value in (values or {}).items():
            setting = setting_for(name)
            if not _satisfies(value, setting.v_type):
                raise ArgTypeError(name, setting.v_type, value)
            checked[name] = value

        self._parent = parent
        self._values = MappingProxyType(checked)
        self._meta = MappingProxyType(meta)

    def _splatlog_self_(self) -> Any:
        return self.description

    @property
    def parent(self) -> Container | None:
        return self._parent

    @property
    def description(self) -> str:
        if src := self._meta.get("src"):
            return f"Container(src={src})"
        return "Container"

    def owns(self, setting: Setting[Any]) -> bool:
        return setting.name in self._values

    def __getitem__(self, setting: Setting[T]) -> T:
        container = self
        while container is not None:
            if container.owns(setting):
                return container._values[setting.name]
            container = container._parent
        return setting.default

    def __contains__(self, setting: object) -> bool:
        container = self
        while container is not None:
            if isinstance(setting, Setting) and container.owns(setting):
                return True
            container = container._parent
        return False

    def items(self) -> Iterable[tuple[str, Any]]:
        """Effective value of every setting, in declaration order."""
        return ((name, self[setting]) for name, setting in SETTINGS.items())

    def derive(self, **changes: Any) -> Container:
        self._log.debug("Deriving config", changes=changes)
        return Container(changes, parent=self, src="configure")

    def __rich_repr__(self) -> RichReprResult:
        yield "values", dict(self._values)
        yield "meta", dict(self._meta), {}
        yield "parent", self._parent, None


def load_env(env: Mapping[str, str] = environ) -> dict[str, Any]:
    """Read whatever settings have env vars set in `env`.

    Bad values are logged and skipped rather than raised. Junk in the
    environment should complain, not keep the package from importing.

    ##### Examples #####

    ```python
    >>> load_env({"OPTBOX_VERBOSITY": "2", "OPTBOX_OTHER": "no"})
    {'verbosity': 2}

    >>> load_env({"OPTBOX_VERBOSITY": "lots"})
    {}

    ```
    """
    values = {}
    for name, setting in SETTINGS.items():
        env_name = setting.env_name
        if env_name not in env:
            continue
        try:
            values[name] = etc.env.get_as(env_name, setting.v_type, env)
        except (TypeError, ValueError):
            LOG.error(
                f"Failed to parse env var for setting {name!r}, "
                "using default",
                env_name=env_name,
                env_value=env[env_name],
                exc_info=True,
            )
    return values


DEFAULTS = Container(
    {name: setting.default for name, setting in SETTINGS.items()},
    src="defaults",
)

#: The root `Container`, shared by all contexts.
GLOBAL = Container(load_env(), parent=DEFAULTS, src="env")

_current = etc.ctx.DerivingContextVar(
    "optbox.cfg.current", Container.derive, GLOBAL
)


def current() -> Container:
    """The `Container` in effect for the current `contextvars.Context`."""
    return _current.get()


def get(setting: Setting[T]) -> T:
    return _current.get()[setting]


def configure(**changes: Any):
    """Layer `changes` on top of the current config for the duration of a
    `with` block.

    Raises `KeyError` for unknown setting names and `optbox.err.ArgTypeError`
    for values of the wrong type, both before the block is entered.
    """
    return _current(**changes)
