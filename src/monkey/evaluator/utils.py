# src/monkey/evaluator/utils.py
import logging

from .. import config as monkey_config
from ..object import EvaluationError, TRUE, FALSE, NULL

logger = logging.getLogger(__name__)

_LOG_METHODS = {
    "error": logger.error,
    "warning": logger.warning,
    "info": logger.info,
    "debug": logger.debug,
}

# Summary counters for lightweight summary logging
EVAL_SUMMARY = {
    'evaluated_statements': 0,
    'errors': 0,
    'max_depth_reached': 0,
}


def reset_summary():
    for key in EVAL_SUMMARY:
        EVAL_SUMMARY[key] = 0


def debug_log(message, data=None, level='debug', config=None):
    """Conditional trace logging that respects the active evaluator config."""
    active = config or monkey_config.get_config()
    if not active.should_log(level):
        return
    log = _LOG_METHODS.get(level, logger.debug)
    if data is not None:
        log("%s: %s", message, data)
    else:
        log("%s", message)


def is_error(obj):
    return isinstance(obj, EvaluationError)


def new_error(fmt, *args):
    return EvaluationError(fmt % args if args else fmt)


def native_bool_to_boolean_object(value):
    return TRUE if value else FALSE


def is_truthy(obj):
    """Only the FALSE and NULL singletons are falsy."""
    return not (obj is FALSE or obj is NULL)


__all__ = [
    'EVAL_SUMMARY', 'reset_summary', 'debug_log', 'is_error', 'new_error',
    'native_bool_to_boolean_object', 'is_truthy', 'TRUE', 'FALSE', 'NULL',
]
