"""Conversions between Presence and Outcome."""

from __future__ import annotations

from typing import Any

from warm_fuzzy_thing.outcome import Failure, Outcome, Success
from warm_fuzzy_thing.presence import AbsentType, Presence, Present

__all__ = ['outcome_to_presence', 'presence_to_outcome']


def presence_to_outcome[T, E](presence: Presence[T], reason: E) -> Outcome[T, E]:
    """Convert a Presence to an Outcome, supplying the reason used for Absent.

    Examples:
        >>> presence_to_outcome(Present(1), 'not_found')
        Success(value=1)
        >>> presence_to_outcome(Absent, 'not_found')
        Failure(reason='not_found')

    Raises:
        TypeError: If presence is not Present or Absent.
    """
    if not isinstance(presence, Present | AbsentType):
        msg = f'presence_to_outcome expects Present or Absent, got {presence!r}'
        raise TypeError(msg)
    return presence.to_outcome(reason)


def outcome_to_presence[T](outcome: Outcome[T, Any]) -> Presence[T]:
    """Convert an Outcome to a Presence. A Failure's reason is discarded.

    Raises:
        TypeError: If outcome is not Success or Failure.
    """
    if not isinstance(outcome, Success | Failure):
        msg = f'outcome_to_presence expects Success or Failure, got {outcome!r}'
        raise TypeError(msg)
    return outcome.to_presence()
