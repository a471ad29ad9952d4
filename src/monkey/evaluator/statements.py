# src/monkey/evaluator/statements.py
from ..environment import Environment
from ..object import ReturnValue
from .utils import is_error, debug_log, EVAL_SUMMARY


class StatementEvaluatorMixin:
    """Handles evaluation of statements and the return/error control flow."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements", config=self.config)

        result = None
        for i, stmt in enumerate(statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__, config=self.config)
            result = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1

            if isinstance(result, ReturnValue):
                debug_log("  ReturnValue encountered", result.value, config=self.config)
                return result.value
            if is_error(result):
                debug_log("  Error encountered", result.message, level='info', config=self.config)
                EVAL_SUMMARY['errors'] += 1
                return result

        debug_log("eval_program completed", result, config=self.config)
        return result

    def eval_block_statement(self, block, env):
        debug_log("eval_block_statement", f"len={len(block.statements)}", config=self.config)

        if self.config.scoped_blocks:
            env = Environment.new_enclosed(env)

        result = None
        for stmt in block.statements:
            result = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1

            # Both stay wrapped so an enclosing block or program can act on them.
            if isinstance(result, ReturnValue) or is_error(result):
                debug_log("  Block interrupted", result, config=self.config)
                return result

        return result

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if is_error(val):
            return val
        return ReturnValue(val)

    def eval_let_statement(self, node, env):
        debug_log("eval_let_statement", f"let {node.name.value}", config=self.config)

        value = self.eval_node(node.value, env)
        if is_error(value):
            return value

        env.set(node.name.value, value)
        return None
