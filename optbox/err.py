from . import etc

# Re-Exports
# ============================================================================
#
# The type errors live in `optbox.etc.err` so `optbox.etc` stays free of
# imports from the rest of the package. They are re-exported here so that
# everything a caller might want to `except` is in one place.
#
ArgTypeError = etc.err.ArgTypeError
ReturnTypeError = etc.err.ReturnTypeError


class OptboxError(Exception):
    pass


class InvalidValueError(OptboxError, ValueError):
    """Raised when trying to make a present `optbox.Optional` out of `None`
    (`optbox.Optional.of`). Use `optbox.Optional.of_nullable` when the value
    may legitimately be missing.
    """

    def __init__(
        self, message: str = "can not make a present Optional of None"
    ):
        super().__init__(message)


class NoValueError(OptboxError, LookupError):
    """Raised when reaching for the value of an empty `optbox.Optional`, via
    `optbox.Optional.get` or a factory-less `optbox.Optional.or_else_throw`.

    Callers that want to avoid this should pick a non-raising path like
    `optbox.Optional.or_else` or `optbox.Optional.or_else_get`.
    """

    def __init__(self, message: str = "no value present"):
        super().__init__(message)
