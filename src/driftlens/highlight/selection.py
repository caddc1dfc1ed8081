"""Which finding, if any, is currently selected.

Selection is an explicit immutable value passed into and returned from each
transition. There are two states: idle (``active_index is None``) and
active on one finding index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """Selection for one displayed audit result."""

    active_index: int | None = None

    @property
    def is_idle(self) -> bool:
        return self.active_index is None


IDLE = SelectionState()


def is_valid_index(index: object, finding_count: int) -> bool:
    """True when *index* addresses one of *finding_count* findings."""
    # bool is an int subclass; True must not select finding 1.
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < finding_count


def select(state: SelectionState, index: int, finding_count: int) -> SelectionState:
    """Make *index* the active finding.

    Selecting the already-active index is a no-op. An out-of-range index is
    rejected and *state* is returned unchanged.
    """
    if not is_valid_index(index, finding_count):
        logger.debug(
            "Rejected selection of finding %r (have %d findings)", index, finding_count
        )
        return state
    if state.active_index == index:
        return state
    return SelectionState(active_index=index)


def clear(state: SelectionState) -> SelectionState:  # noqa: ARG001
    """Return to idle, from any state."""
    return IDLE


def current(state: SelectionState) -> int | None:
    return state.active_index
