"""
Utility decorators for input validation and command logging.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from memesim.core.exceptions.market import EmptyHoldingError, MemesimException, ValidationError
from memesim.core.utils.validation import parse_dollar_amount, validate_asset_id

_CONTEXT_PARAMS = ["asset_id", "dollar_amount"]

F = TypeVar("F", bound=Callable[..., Any])


def _bind_arguments(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()
    return bound_args


def _validate_command_parameter(param_name: str, value: Any, bound_args: Any) -> None:
    """Validate a single command parameter."""
    if param_name == "asset_id":
        try:
            bound_args.arguments[param_name] = validate_asset_id(value)
        except TypeError as e:
            raise ValidationError(f"Invalid {param_name}: {e}") from e

    elif param_name == "dollar_amount":
        bound_args.arguments[param_name] = parse_dollar_amount(value)


def validate_inputs(func: F) -> F:
    """Decorator to validate command inputs (asset_id, dollar_amount).

    ``dollar_amount`` is parsed into a float before the wrapped function runs,
    so the function body only ever sees a finite positive number.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound_args = _bind_arguments(func, args, kwargs)
        for param_name, value in bound_args.arguments.items():
            if param_name != "self":
                _validate_command_parameter(param_name, value, bound_args)
        return func(*bound_args.args, **bound_args.kwargs)

    return wrapper  # type: ignore


def _extract_command_context(bound_args: Any) -> dict[str, Any]:
    """Extract command context from function arguments."""
    return {
        param_name: value
        for param_name, value in bound_args.arguments.items()
        if param_name in _CONTEXT_PARAMS
    }


def _create_success_context(
    base_context: dict[str, Any], execution_time_ms: float, result: Any
) -> dict[str, Any]:
    """Create success logging context."""
    success_context = {
        **base_context,
        "success": True,
        "execution_time_ms": round(execution_time_ms, 2),
        "result_type": type(result).__name__,
    }

    if isinstance(result, bool | int | float | str):
        success_context["result"] = result

    return success_context


def _create_error_context(
    base_context: dict[str, Any], execution_time_ms: float, error: Exception
) -> dict[str, Any]:
    """Create error logging context."""
    return {
        **base_context,
        "success": False,
        "execution_time_ms": round(execution_time_ms, 2),
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


def _execute_with_logging(
    func: Callable[..., Any],
    context: dict[str, Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Execute function with command logging."""
    func_name = func.__name__
    logger.bind(**context).debug(f"Command started: {func_name}")
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except MemesimException as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        error_context = _create_error_context(context, execution_time_ms, e)
        logger.bind(**error_context).info(f"Command rejected: {func_name} ({e})")
        raise
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        error_context = _create_error_context(context, execution_time_ms, e)
        logger.bind(**error_context).error(f"Command failed: {func_name}")
        raise

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    success_context = _create_success_context(context, execution_time_ms, result)
    logger.bind(**success_context).success(f"Command completed: {func_name}")
    return result


def log_command(func: F) -> F:
    """Decorator to log ledger commands with correlation IDs."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound_args = _bind_arguments(func, args, kwargs)
        context = {
            "correlation_id": str(uuid.uuid4())[:8],
            **_extract_command_context(bound_args),
        }
        return _execute_with_logging(func, context, args, kwargs)

    return wrapper  # type: ignore


def require_holding(asset_param: str = "asset_id") -> Callable[[F], F]:
    """Decorator to ensure an open holding exists before executing the function.

    The decorated object must expose a ``holdings`` mapping.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound_args = _bind_arguments(func, args, kwargs)
            self_obj = bound_args.arguments.get("self")
            asset_id = bound_args.arguments.get(asset_param)

            holding = self_obj.holdings.get(asset_id) if self_obj is not None else None
            if holding is None or holding.quantity <= 0:
                raise EmptyHoldingError(str(asset_id))
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
