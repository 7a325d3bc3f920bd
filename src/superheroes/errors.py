"""Exception types raised by the catalog browser."""


class SuperheroesError(Exception):
    """Base class for all catalog browser errors."""


class MissingResourceError(SuperheroesError):
    """A string or image reference does not resolve.

    This is a configuration defect in the compiled-in tables or the asset
    directory, so it is expected to surface in tests rather than at runtime.
    """

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"missing {kind} resource: {key!r}")


class ConfigError(SuperheroesError):
    """Dimension overrides could not be applied."""
