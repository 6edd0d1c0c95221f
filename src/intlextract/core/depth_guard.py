"""Recursion budget shared by the message parser and the static evaluator.

Both walk structures that user code controls: plural/select options nested
inside message text, and expression trees or const-binding chains in source.
A DepthGuard turns runaway nesting into a DepthLimitExceededError long before
the interpreter would raise RecursionError.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from intlextract.constants import MAX_DEPTH
from intlextract.diagnostics import ExtractionError
from intlextract.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(ExtractionError):
    """Nesting went past the guard's budget.

    The parser reports it as a message syntax error; the evaluator treats the
    expression as not statically known.
    """


@dataclass(slots=True)
class DepthGuard:
    """Counts nested ``with`` blocks and refuses to go past ``max_depth``.

    One guard is created per parse or per evaluation and threaded through the
    recursive calls::

        guard = DepthGuard()
        with guard:
            value = self._evaluate(child, guard)
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Check before counting: a raising __enter__ gets no matching __exit__.
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.nesting_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower ``requested_depth`` so it fits under ``sys.getrecursionlimit()``.

    ``reserve_frames`` are kept free for the frames between two guarded
    levels (visitor dispatch, tree-sitter property access).
    """
    ceiling = sys.getrecursionlimit() - reserve_frames
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Nesting budget %d does not fit the recursion limit %d; using %d",
        requested_depth,
        sys.getrecursionlimit(),
        ceiling,
    )
    return ceiling
