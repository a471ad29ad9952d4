# src/monkey/evaluator/expressions.py
from ..object import Integer, INTEGER_OBJ
from .utils import (
    is_error, debug_log, new_error, native_bool_to_boolean_object,
    is_truthy, TRUE, FALSE, NULL,
)

_UINT64 = 1 << 64


def to_int64(value):
    """Wrap a Python int to the signed 64-bit range."""
    value &= _UINT64 - 1
    return value - _UINT64 if value >= (1 << 63) else value


def truncating_divmod(left, right):
    """Quotient and remainder rounded toward zero (Python's ``//`` floors)."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient, left - right * quotient


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Identifiers, Prefix, Infix, If."""

    def eval_identifier(self, node, env):
        val, found = env.get(node.value)
        if not found:
            debug_log("  Identifier not found", node.value, config=self.config)
            return new_error("Identifier not found: %s", node.value)
        return val

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_error(right):
            return right
        return self.eval_prefix_operator(node.operator, right)

    def eval_prefix_operator(self, operator, right):
        if operator == "!":
            return self.eval_bang_operator(right)
        elif operator == "-":
            return self.eval_minus_operator(right)
        return new_error("Unknown operator: %s%s", operator, right.type())

    def eval_bang_operator(self, right):
        # !false = true, !null = true, !anything_else = false
        if right is FALSE or right is NULL:
            return TRUE
        return FALSE

    def eval_minus_operator(self, right):
        if right.type() != INTEGER_OBJ:
            return new_error("Unknown operator: -%s", right.type())
        return Integer(to_int64(-right.value))

    def eval_infix_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        return self.eval_infix_operator(node.operator, left, right)

    def eval_infix_operator(self, operator, left, right):
        if left.type() == INTEGER_OBJ and right.type() == INTEGER_OBJ:
            return self.eval_integer_infix(operator, left, right)
        if left.type() != right.type():
            return new_error("Mismatched types: %s %s %s", left.type(), operator, right.type())
        # Identity comparison; only meaningful for the interned Boolean/Null.
        if operator == "==":
            return native_bool_to_boolean_object(left is right)
        if operator == "!=":
            return native_bool_to_boolean_object(left is not right)
        return new_error("Unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(to_int64(left_val + right_val))
        elif operator == "-":
            return Integer(to_int64(left_val - right_val))
        elif operator == "*":
            return Integer(to_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("Division by zero: %d / %d", left_val, right_val)
            return Integer(to_int64(truncating_divmod(left_val, right_val)[0]))
        elif operator == "%":
            if right_val == 0:
                return new_error("Modulo by zero: %d %% %d", left_val, right_val)
            return Integer(truncating_divmod(left_val, right_val)[1])
        elif operator == "<":
            return native_bool_to_boolean_object(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean_object(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean_object(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean_object(left_val != right_val)

        return new_error("Unknown operator: %s %s %s", left.type(), operator, right.type())

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if is_error(condition):
            return condition

        if is_truthy(condition):
            debug_log("  Condition true, evaluating consequence", config=self.config)
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            debug_log("  Condition false, evaluating alternative", config=self.config)
            return self.eval_node(node.alternative, env)

        debug_log("  Condition false, no alternative", config=self.config)
        return NULL
