"""Error taxonomy for the bazekit CLI."""

from __future__ import annotations

from typing import Optional


class BazekitError(Exception):
    """Base class for all user-facing bazekit failures."""

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class UsageError(BazekitError):
    pass


class ConfigParseError(BazekitError):
    exit_code = 2


class RegistryError(BazekitError):
    """Registry could not be loaded. Fatal for add/list."""

    exit_code = 3


class RegistryFetchError(RegistryError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RegistryParseError(RegistryError):
    pass


class RegistrySchemaError(RegistryError):
    exit_code = 4


class RegistrySizeLimitError(RegistryError):
    exit_code = 5


class ComponentError(BazekitError):
    """Per-component or per-file failure. Reported, never fatal to a batch."""


class UnknownComponentError(ComponentError):
    pass


class EmptyFileListError(ComponentError):
    pass


class FileFetchError(ComponentError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
