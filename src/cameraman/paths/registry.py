"""Registry of path evaluators.

Evaluators register themselves with the @PathRegistry.register decorator, one
per PathMode. The registry is the single dispatch point from a profile's path
mode to the code that evaluates it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from cameraman.paths.base import PathEvaluator
    from cameraman.types import PathMode

logger = logging.getLogger(__name__)


class UnknownPathModeError(LookupError):
    """Raised when no evaluator is registered for a path mode."""


class PathRegistry:
    """Central registry for path evaluators.

    Class Attributes:
        _evaluators: Dictionary mapping path modes to evaluator instances.
    """

    _evaluators: ClassVar[dict[PathMode, PathEvaluator]] = {}

    @classmethod
    def register(cls, evaluator_class: type[PathEvaluator]) -> type[PathEvaluator]:
        """Register a path evaluator class.

        Used as a decorator on evaluator classes. Evaluators are stateless, so
        a single instance is created and shared.

        Args:
            evaluator_class: The evaluator class to register.

        Returns:
            The same class, allowing use as a decorator.

        Raises:
            ValueError: If the class doesn't define a 'mode' attribute.
        """
        mode = getattr(evaluator_class, "mode", None)
        if mode is None:
            msg = f"Path evaluator {evaluator_class.__name__} must define a 'mode' class attribute"
            raise ValueError(msg)

        if mode in cls._evaluators:
            logger.warning(
                "Path mode '%s' is being re-registered (was %s, now %s)",
                mode.name,
                type(cls._evaluators[mode]).__name__,
                evaluator_class.__name__,
            )

        cls._evaluators[mode] = evaluator_class()
        logger.debug("Registered path evaluator: %s -> %s", mode.name, evaluator_class.__name__)
        return evaluator_class

    @classmethod
    def get(cls, mode: PathMode) -> PathEvaluator:
        """Get the evaluator for a path mode.

        Raises:
            UnknownPathModeError: If no evaluator handles `mode`.
        """
        try:
            return cls._evaluators[mode]
        except KeyError:
            msg = f"No path evaluator registered for {mode!r}"
            raise UnknownPathModeError(msg) from None

