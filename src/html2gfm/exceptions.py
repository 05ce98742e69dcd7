#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2gfm library.

These exceptions cover build-time misuse of a converter and invalid inputs
handed to the conversion entry points. Errors raised by conversion rules are
never wrapped: they propagate to the caller unchanged and abort the whole
conversion.

Exception Hierarchy
-------------------
- Html2GfmError (base exception)

  - ValidationError (invalid build-time arguments)
    - InvalidRuleError (malformed conversion rule)
    - PluginNotFoundError (unknown plugin name)

  - InputError (unsupported input passed to a converter)

"""

from typing import Any


class Html2GfmError(Exception):
    """Base exception class for all html2gfm-specific errors.

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


class ValidationError(Html2GfmError):
    """Exception raised for invalid arguments while building a converter.

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


class InvalidRuleError(ValidationError):
    """Exception raised when a conversion rule cannot be registered.

    Raised for objects that are not ``Rule`` or ``AdvancedRule`` instances and
    for rules that declare no tags.

    Parameters
    ----------
    rule : any
        The rejected rule object
    message : str, optional
        Custom error message

    """

    def __init__(self, rule: Any, message: str | None = None):
        """Initialize the invalid rule error."""
        if message is None:
            message = f"Invalid conversion rule: {rule!r}"
        super().__init__(message, parameter_name="rules", parameter_value=rule)
        self.rule = rule


class PluginNotFoundError(ValidationError):
    """Exception raised when a plugin name cannot be resolved.

    Parameters
    ----------
    plugin_name : str
        The name that was looked up
    available : list[str], optional
        Plugin names that are available

    """

    def __init__(self, plugin_name: str, available: list[str] | None = None):
        """Initialize the plugin lookup error."""
        available = available or []
        message = f"Unknown plugin '{plugin_name}'"
        if available:
            message += f". Available plugins: {', '.join(sorted(available))}"
        super().__init__(message, parameter_name="plugins", parameter_value=plugin_name)
        self.plugin_name = plugin_name
        self.available = available


class InputError(Html2GfmError):
    """Exception raised when a converter receives input it cannot process.

    Parameters
    ----------
    message : str
        Description of the input error
    input_type : type, optional
        Type of the rejected input
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, input_type: type | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error=original_error)
        self.input_type = input_type


__all__ = [
    "Html2GfmError",
    "ValidationError",
    "InvalidRuleError",
    "PluginNotFoundError",
    "InputError",
]
