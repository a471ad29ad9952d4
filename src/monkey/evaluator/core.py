# src/monkey/evaluator/core.py
import sys

from .. import monkey_ast
from .. import config as monkey_config
from ..environment import Environment
from ..errors import EvaluationDepthError, UnsupportedNodeError
from ..object import Integer
from .utils import debug_log, native_bool_to_boolean_object, EVAL_SUMMARY
from .expressions import ExpressionEvaluatorMixin, to_int64
from .statements import StatementEvaluatorMixin


# A nesting level costs three Python frames; the fourth is slack.
_FRAMES_PER_LEVEL = 4
_FRAME_HEADROOM = 200


def ensure_recursion_limit(max_depth):
    """Raise the interpreter's recursion limit so ``max_depth`` levels fit."""
    needed = max_depth * _FRAMES_PER_LEVEL + _FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin):
    def __init__(self, config=None):
        self.config = config or monkey_config.get_config()
        self.depth = 0
        ensure_recursion_limit(self.config.max_depth)

    def eval_node(self, node, env):
        """Evaluate ``node`` in ``env``.

        Returns an Object, a ReturnValue/EvaluationError signal, or ``None``
        for nodes that produce no value (let statements, unknown kinds).
        """
        self.depth += 1
        try:
            if self.depth > self.config.max_depth:
                raise EvaluationDepthError(self.depth, self.config.max_depth)
            if self.depth > EVAL_SUMMARY['max_depth_reached']:
                EVAL_SUMMARY['max_depth_reached'] = self.depth
            return self._dispatch(node, env)
        finally:
            self.depth -= 1

    def _dispatch(self, node, env):
        node_type = type(node)

        # === STATEMENTS ===
        if node_type == monkey_ast.Program:
            return self.eval_program(node.statements, env)

        elif node_type == monkey_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == monkey_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == monkey_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        elif node_type == monkey_ast.LetStatement:
            return self.eval_let_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == monkey_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == monkey_ast.IntegerLiteral:
            return Integer(to_int64(node.value))

        elif node_type == monkey_ast.Boolean:
            return native_bool_to_boolean_object(node.value)

        elif node_type == monkey_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == monkey_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == monkey_ast.IfExpression:
            return self.eval_if_expression(node, env)

        # Fallback
        if self.config.strict_nodes:
            raise UnsupportedNodeError(node)
        debug_log("  Unknown node type", node_type.__name__, level='warning', config=self.config)
        return None


# Global Entry Point
def evaluate(program, env=None, config=None, debug_mode=False):
    """Evaluate ``program`` against ``env`` (a fresh root scope when omitted)."""
    config = config or monkey_config.get_config()
    if debug_mode:
        config = config.with_overrides(debug_level="debug")
    if env is None:
        env = Environment()

    evaluator = Evaluator(config)
    return evaluator.eval_node(program, env)
