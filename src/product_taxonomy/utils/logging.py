from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable, Tuple, Type

from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _summarize(result: Any) -> str:
    try:
        return f"{type(result).__name__} with {len(result)} item(s)"
    except TypeError:
        return repr(result)


def log_calls(
    logger_name: str | None = None,
    *,
    expected: Tuple[Type[BaseException], ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging loader calls at DEBUG level.

    Exceptions listed in ``expected`` (rejected source data) are logged at
    DEBUG and re-raised; anything else is logged with its traceback first.
    """

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s", func.__name__)
            try:
                result = func(*args, **kwargs)
            except expected as e:
                logger.debug("%s rejected source data: %s", func.__name__, e)
                raise
            except Exception as e:
                logger.exception("Error in %s: %s", func.__name__, e)
                raise
            logger.debug("%s returned %s", func.__name__, _summarize(result))
            return result

        return _wrapper

    return _decorator
