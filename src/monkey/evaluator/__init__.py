# src/monkey/evaluator/__init__.py
from .core import Evaluator, evaluate
from .utils import EVAL_SUMMARY, reset_summary, is_error, is_truthy

__all__ = ['Evaluator', 'evaluate', 'EVAL_SUMMARY', 'reset_summary', 'is_error', 'is_truthy']
