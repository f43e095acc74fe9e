#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the nbast library.

These exceptions are raised by the notebook adapter, the text-processing
wrappers and the command line interface. The tree walker and the MIME
classifier never raise their own errors: exceptions thrown inside walker
callbacks propagate to the caller unchanged, and classification absence is
expressed through sentinel results.

Exception Hierarchy
-------------------
- NbAstError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - MalformedFileError (invalid notebook JSON or layout)

  - ParsingError (markdown/HTML/notebook parsing failures)

  - DependencyError (missing optional packages or parser backends)

"""

from typing import Any


class NbAstError(Exception):
    """Base exception class for all nbast-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(NbAstError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(NbAstError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class MalformedFileError(FileError):
    """Exception raised when a notebook is not valid JSON or lacks a cell list."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(NbAstError):
    """Exception raised when parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DependencyError(NbAstError):
    """Exception raised when an optional package or parser backend is missing.

    Parameters
    ----------
    component : str
        Name of the component requiring the dependency (e.g. "html")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates one with an
        install hint

    """

    def __init__(
        self,
        component: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{component} processing requires the following packages: {pkg_list}"
            if missing_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_error)
        self.component = component
        self.missing_packages = missing_packages
