# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Fatal error types. Both subclass ValueError so callers can treat every
bad-input condition the same way.
"""


class ConfigError(ValueError):
    """The roster config file is missing or malformed."""


class StateFileError(ValueError):
    """A history or snapshot file is malformed or lacks its structure."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid data in {path}: {reason}")
        self.path = path
        self.reason = reason
