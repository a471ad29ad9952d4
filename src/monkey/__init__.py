"""Monkey: tree-walking evaluator, object model and lexical environments."""

from .environment import Environment
from .evaluator import Evaluator, evaluate, EVAL_SUMMARY, reset_summary
from .config import EvaluatorConfig, get_config, set_config
from .errors import MonkeyError, EvaluationDepthError, UnsupportedNodeError, UnhashableKeyError
from .object import (
    Object,
    Integer,
    String,
    Boolean,
    Null,
    ReturnValue,
    EvaluationError,
    Function,
    Builtin,
    Array,
    Hash,
    HashKey,
    HashPair,
    Hashable,
    TRUE,
    FALSE,
    NULL,
)

__version__ = "0.1.0"

__all__ = [
    "evaluate",
    "Evaluator",
    "Environment",
    "EvaluatorConfig",
    "get_config",
    "set_config",
    "EVAL_SUMMARY",
    "reset_summary",
    "MonkeyError",
    "EvaluationDepthError",
    "UnsupportedNodeError",
    "UnhashableKeyError",
    "Object",
    "Integer",
    "String",
    "Boolean",
    "Null",
    "ReturnValue",
    "EvaluationError",
    "Function",
    "Builtin",
    "Array",
    "Hash",
    "HashKey",
    "HashPair",
    "Hashable",
    "TRUE",
    "FALSE",
    "NULL",
]
