#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the grab library.

This module defines specialized exception classes for the error conditions
that can occur while compiling a pattern, reading lines and rendering output.
These exceptions provide more specific error information than generic
built-ins.

Exception Hierarchy
-------------------
- GrabError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidContextLengthError (context size is not a non-negative integer)
    - ConfigError (unreadable or malformed configuration file)

  - PatternSyntaxError (malformed regular expression)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, unreadable streams)
    - OutputWriteError (writing to the output stream failed)

  - LineDecodingError (a line is not valid text in the chosen encoding)

"""

from typing import Any


class GrabError(Exception):
    """Base exception class for all grab-specific errors.

    Catching this will catch every error raised by the search engine,
    the line source, the renderer and the CLI configuration layer.

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


class ValidationError(GrabError):
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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidContextLengthError(ValidationError):
    """Exception raised when a context size is not a non-negative integer.

    Parameters
    ----------
    parameter_name : str
        Option that carried the value (e.g. ``after_context``)
    parameter_value : any
        The rejected value
    message : str, optional
        Custom error message. If not provided, generates one
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid context length error."""
        if message is None:
            message = (
                f"invalid context length for {parameter_name}: {parameter_value!r} (expected a non-negative integer)"
            )
        super().__init__(
            message, parameter_name=parameter_name, parameter_value=parameter_value, original_error=original_error
        )


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path to the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class PatternSyntaxError(GrabError):
    """Exception raised when the search pattern is not a valid regular expression.

    Parameters
    ----------
    pattern : str
        The pattern that failed to compile
    message : str, optional
        Custom error message. If not provided, derived from the regex error
    original_error : Exception, optional
        The underlying ``re.error``

    Attributes
    ----------
    pattern : str
        The rejected pattern

    """

    def __init__(self, pattern: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the pattern syntax error."""
        if message is None:
            detail = f": {original_error}" if original_error is not None else ""
            message = f"regex parse error in pattern {pattern!r}{detail}"
        super().__init__(message, original_error=original_error)
        self.pattern = pattern


class FileError(GrabError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file cannot be read.

    This includes permission errors, directories given as input and
    read failures in the middle of a stream.

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when writing rendered output fails.

    Parameters
    ----------
    target : str
        Name of the output stream or file
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, target: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output to {target}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, file_path=target, original_error=original_error)


class LineDecodingError(GrabError):
    """Exception raised when a line is not valid text in the chosen encoding.

    Only raised when strict decoding is requested; otherwise the line is
    decoded with replacement characters and processing continues.

    Parameters
    ----------
    line_index : int
        0-based index of the undecodable line
    encoding : str
        Encoding that was attempted
    source_name : str, optional
        Display name of the line source
    original_error : Exception, optional
        The underlying ``UnicodeDecodeError``

    """

    def __init__(
        self,
        line_index: int,
        encoding: str,
        source_name: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the line decoding error."""
        where = f" of {source_name}" if source_name else ""
        message = f"Line {line_index + 1}{where} is not valid {encoding} text"
        super().__init__(message, original_error=original_error)
        self.line_index = line_index
        self.encoding = encoding
        self.source_name = source_name
