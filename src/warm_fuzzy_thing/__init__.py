"""warm-fuzzy-thing: Outcome and Presence containers with short-circuit chaining.

Flat imports (preferred):
    from warm_fuzzy_thing import Success, Failure, Present, Absent
    from warm_fuzzy_thing import fmap, bind, fold, presence_to_outcome

Module imports (container-specific operations):
    from warm_fuzzy_thing import outcome, presence
    outcome.sequence([...])
    presence.pure(None)
"""

import logging

from warm_fuzzy_thing import convert, monad, outcome, presence

# Configuration and logging
from warm_fuzzy_thing._config import Config, get_config, init
from warm_fuzzy_thing._logging import configure_logging, get_logger

# Conversions
from warm_fuzzy_thing.convert import outcome_to_presence, presence_to_outcome

# Errors
from warm_fuzzy_thing.errors import CallbackContractError, NoInstanceError

# Container-generic operations
from warm_fuzzy_thing.monad import bind, fmap, fold, identity, is_container, on_empty, on_value

# Outcome types
from warm_fuzzy_thing.outcome import Failure, Outcome, Success, is_failure, is_success

# Presence types
from warm_fuzzy_thing.presence import Absent, AbsentType, Presence, Present, is_absent, is_present

# Typeclass
from warm_fuzzy_thing.typeclass import typeclass

logging.getLogger('warm_fuzzy_thing').addHandler(logging.NullHandler())

__all__ = [
    'Absent',
    'AbsentType',
    'CallbackContractError',
    'Config',
    'Failure',
    'NoInstanceError',
    'Outcome',
    'Presence',
    'Present',
    'Success',
    'bind',
    'configure_logging',
    'convert',
    'fmap',
    'fold',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'is_absent',
    'is_container',
    'is_failure',
    'is_present',
    'is_success',
    'monad',
    'on_empty',
    'on_value',
    'outcome',
    'outcome_to_presence',
    'presence',
    'presence_to_outcome',
    'typeclass',
]
