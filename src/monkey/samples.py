"""Prebuilt programs for the CLI (``monkey run monkey.samples:nested_return``).

There is no parser in this package, so each sample assembles its tree by
hand with the small builders below.
"""

from .monkey_ast import (
    Program, LetStatement, ReturnStatement, ExpressionStatement, BlockStatement,
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression, IfExpression,
)


def ident(name):
    return Identifier(name)


def lit(value):
    if isinstance(value, bool):
        return Boolean(value)
    return IntegerLiteral(value)


def infix(left, operator, right):
    return InfixExpression(left, operator, right)


def prefix(operator, right):
    return PrefixExpression(operator, right)


def let(name, value):
    return LetStatement(Identifier(name), value)


def ret(value):
    return ReturnStatement(value)


def expr(expression):
    return ExpressionStatement(expression)


def block(*statements):
    return BlockStatement(list(statements))


def if_(condition, consequence, alternative=None):
    return IfExpression(condition, consequence, alternative)


def program(*statements):
    return Program(list(statements))


def arithmetic():
    """let a = 5; let b = a * 2 + 10; (b - a) / 3 % 4   => 1"""
    return program(
        let("a", lit(5)),
        let("b", infix(infix(ident("a"), "*", lit(2)), "+", lit(10))),
        expr(infix(infix(infix(ident("b"), "-", ident("a")), "/", lit(3)), "%", lit(4))),
    )


def nested_return():
    """if (true) { if (true) { return 10; } return 1; }   => 10"""
    return program(
        expr(if_(lit(True), block(
            expr(if_(lit(True), block(ret(lit(10))))),
            ret(lit(1)),
        ))),
    )


def conditional():
    """let x = 7; if (x > 5) { x * 2 } else { -x }   => 14"""
    return program(
        let("x", lit(7)),
        expr(if_(
            infix(ident("x"), ">", lit(5)),
            block(expr(infix(ident("x"), "*", lit(2)))),
            block(expr(prefix("-", ident("x")))),
        )),
    )


def type_mismatch():
    """5 + true; 10   => ERROR: Mismatched types: INTEGER + BOOLEAN"""
    return program(
        expr(infix(lit(5), "+", lit(True))),
        expr(lit(10)),
    )


def unbound():
    """foobar   => ERROR: Identifier not found: foobar"""
    return program(expr(ident("foobar")))


SAMPLES = {
    "arithmetic": arithmetic,
    "nested_return": nested_return,
    "conditional": conditional,
    "type_mismatch": type_mismatch,
    "unbound": unbound,
}
