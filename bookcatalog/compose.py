"""
Step pipelines for catalog queries.
"""

import logging
from functools import reduce
from typing import Any, Callable

Step = Callable[[Any], Any]


def pipe(value: Any, *steps: Step) -> Any:
    """Feed ``value`` through ``steps``, left to right."""
    return reduce(lambda acc, step: step(acc), steps, value)


def tap(side_effect: Callable[[Any], None]) -> Step:
    """A step that runs ``side_effect`` and passes its input on unchanged."""

    def tapped(value):
        side_effect(value)
        return value

    return tapped


def log_size(logger: logging.Logger, message: str) -> Step:
    """A tap step logging ``message`` at DEBUG, with ``%d`` set to the collection size."""
    return tap(lambda items: logger.debug(message, len(items)))
