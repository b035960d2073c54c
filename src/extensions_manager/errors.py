from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    TIMEOUT = "TIMEOUT"
    VALIDATION = "VALIDATION"
    WRONG_TYPE = "WRONG_TYPE"
    UNSUPPORTED_PACKAGE = "UNSUPPORTED_PACKAGE"
    INSTALL_ERROR = "INSTALL_ERROR"
    UNINSTALL_ERROR = "UNINSTALL_ERROR"
    UPDATE_ERROR = "UPDATE_ERROR"
    CHECK_UPDATES_ERROR = "CHECK_UPDATES_ERROR"


class ExtensionError(Exception):
    """Base class for every failure reported by the extensions manager.

    Attributes:
        code: The error kind.
        fields: Structured context (extension name, type, path, ...).
    """

    code: ErrorCode = ErrorCode.VALIDATION

    def __init__(self, message: str, **fields: Any) -> None:
        self.fields = fields
        super().__init__(message)


class NotFoundError(ExtensionError):
    """Raised when an operation needs an installed extension and there is none."""

    code = ErrorCode.NOT_FOUND


class RegistryTimeoutError(ExtensionError):
    """Raised when the registry cannot be reached or returns an unreadable body."""

    code = ErrorCode.TIMEOUT


class InvalidInputError(ExtensionError):
    code = ErrorCode.VALIDATION


class WrongTypeError(ExtensionError):
    """Raised when none of an extension's keywords is a configured type."""

    code = ErrorCode.WRONG_TYPE


class UnsupportedPackageError(ExtensionError):
    """Raised when the registry descriptor has no version."""

    code = ErrorCode.UNSUPPORTED_PACKAGE


class InstallError(ExtensionError):
    code = ErrorCode.INSTALL_ERROR


class UninstallError(ExtensionError):
    code = ErrorCode.UNINSTALL_ERROR


class UpdateError(ExtensionError):
    code = ErrorCode.UPDATE_ERROR


class CheckUpdatesError(ExtensionError):
    code = ErrorCode.CHECK_UPDATES_ERROR


class LoadError(ExtensionError):
    """Raised when a config, manifest, or scheme file cannot be read or parsed.

    Attributes:
        path: The file that could not be loaded, if applicable.
    """

    code = ErrorCode.VALIDATION

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message, path=str(path) if path is not None else None)


class CommandError(Exception):
    """Raised by a package-manager adapter when a command fails or times out.

    Attributes:
        command: The argv that was run.
        returncode: Exit status, or None if the process never finished.
        stderr: Captured standard error, stripped.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
