"""
Decorators for controller layer functionality.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

F = TypeVar('F', bound=Callable[..., Any])


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to automatically log controller actions.

    The decorated method's instance must expose a ``_logger`` attribute;
    when it does not, the call runs unlogged.

    Args:
        action_name: Optional custom name for the action. If not provided,
                    the function name will be used.

    Example:
        @logged_action("Game setup")
        def setup(self) -> GameState:
            ...
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            name = action_name or func.__name__

            if logger:
                logger.debug(f"Starting {name}")

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    logger.error(f"Failed {name}: {e}")
                raise

            if logger:
                logger.debug(f"Completed {name} successfully")
            return result

        return wrapper
    return decorator
