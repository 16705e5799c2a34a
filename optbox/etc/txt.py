"""Turning things into plain, markdown-ish strings, mostly for error messages.

> ❗❗ WARNING ❗❗
>
> This module is used in already bad situations, like formatting error
> messages.
>
> As such, it must **_NOT_** depend on any parts of the package outside
> `optbox.etc`, and it must **_NOT_** raise exceptions unless there is a logic
> error that needs to be fixed.
>
"""

from functools import reduce
from io import StringIO
import re

import splatlog.lib.text

from rich.console import Console
from rich.pretty import Pretty
from rich.padding import Padding

_CONSOLE = Console(
    file=StringIO(),
    force_terminal=False,
    width=80,
)

fmt = splatlog.lib.text.fmt
fmt_type_of = splatlog.lib.text.fmt_type_of


_ENV_NAME_SUBS = (
    # Trim anything we can't use from the start (don't create leading '_')
    (re.compile(r"^[^A-Za-z0-9_]+"), ""),
    # Trim anything we can't use from the end (don't create trailing '_')
    (re.compile(r"[^A-Za-z0-9_]+$"), ""),
    # Replace any runs we can't use with a single '_'
    (re.compile(r"[^A-Za-z0-9_]+"), "_"),
)


def as_env_name(name: str) -> str:
    """
    ##### Examples #####

    ```python
    >>> as_env_name("optbox.verbosity")
    'OPTBOX_VERBOSITY'

    >>> as_env_name("[[a/b/c?]]")
    'A_B_C'

    >>> as_env_name("?^%!$@%^$!")
    Traceback (most recent call last):
        ...
    ValueError: no usable characters in `name`; converted '?^%!$@%^$!' -> ''

    ```
    """
    env_name = reduce(
        lambda name, sub: sub[0].sub(sub[1], name), _ENV_NAME_SUBS, name
    ).upper()

    if env_name == "" or set(env_name) == {"_"}:
        raise ValueError(
            "no usable characters in `name`; "
            f"converted {name!r} -> {env_name!r}"
        )

    return env_name


def fmt_pretty(obj: object) -> str:
    with _CONSOLE.capture() as capture:
        _CONSOLE.print(Padding(Pretty(obj), (0, 4)))
    return capture.get()
