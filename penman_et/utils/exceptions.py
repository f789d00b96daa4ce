"""
Custom exceptions for the Penman-Monteith ET0 calculator.

Provides a hierarchical exception system so callers can tell bad station
configuration, bad observations and ill-posed computations apart.
"""

from functools import wraps


class PenmanETError(Exception):
    """
    Base exception for penman_et errors.

    All custom exceptions inherit from this class.
    Provides context information about the error location and details.
    """

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def add_detail(self, key: str, value) -> None:
        """
        Add detail information to the exception.

        Args:
            key: Detail key
            value: Detail value
        """
        self.details[key] = value


class InvalidConfigurationError(PenmanETError):
    """
    Exception raised for invalid station configuration.

    This includes:
    - Albedo outside [0, 1]
    - Latitude outside [-90, 90]
    - Elevation with a non-positive pressure base
    - Unreadable or malformed configuration files
    """

    def __init__(self, message: str, config_param: str = None, value=None, *args):
        details = {}
        if config_param:
            details["parameter"] = config_param
        if value is not None:
            details["value"] = value
        super().__init__(message, details, *args)


class InvalidObservationError(PenmanETError):
    """
    Exception raised for invalid daily weather observations.

    This includes:
    - Relative humidity outside [0, 100]
    - Maximum below minimum for temperature or humidity
    - Negative wind speed
    - Day of year outside [1, 366]
    """

    def __init__(self, message: str, field: str = None, value=None, *args):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details, *args)


class ComputationError(PenmanETError):
    """
    Exception raised when the calculation pipeline cannot produce a
    finite result.
    """

    def __init__(self, message: str, computation_step: str = None, details: dict = None, *args):
        details = dict(details or {})
        if computation_step:
            details["step"] = computation_step
        super().__init__(message, details, *args)


class IllPosedGeometryError(ComputationError):
    """
    Exception raised when the sunset hour angle is undefined.

    Happens when |tan(latitude) * tan(declination)| > 1, i.e. polar day or
    polar night for the given latitude and day of year.
    """

    def __init__(self, message: str, latitude: float = None, declination: float = None, *args):
        details = {}
        if latitude is not None:
            details["latitude"] = latitude
        if declination is not None:
            details["declination"] = declination
        super().__init__(message, computation_step="sunset_hour_angle", details=details, *args)


class ArithmeticDegenerateError(ComputationError):
    """
    Exception raised for vanishing denominators or non-finite intermediates.
    """

    def __init__(self, message: str, computation_step: str = None, term: str = None, *args):
        details = {}
        if term:
            details["term"] = term
        super().__init__(message, computation_step=computation_step, details=details, *args)


# Error handling utilities

def handle_exception(func):
    """
    Decorator to wrap pipeline functions with exception handling.

    Converts arithmetic failures to ArithmeticDegenerateError while
    preserving the original error as the cause.

    Usage:
        @handle_exception
        def my_function():
            pass
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PenmanETError:
            # Re-raise our own errors as-is
            raise
        except (ZeroDivisionError, FloatingPointError) as e:
            raise ArithmeticDegenerateError(
                f"Arithmetic error in {func.__name__}: {e}",
                computation_step=func.__name__
            ) from e
        except ValueError as e:
            raise ArithmeticDegenerateError(
                f"Value error in {func.__name__}: {e}",
                computation_step=func.__name__
            ) from e
    return wrapper


def create_error_context(error: Exception, context: dict) -> dict:
    """
    Create a comprehensive error context dictionary.

    Args:
        error: The exception that occurred
        context: Additional context information

    Returns:
        Dictionary with error details
    """
    context_data = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    if hasattr(error, 'details'):
        context_data["error_details"] = error.details

    if context:
        context_data["additional_context"] = context

    return context_data
