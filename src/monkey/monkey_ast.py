# src/monkey/monkey_ast.py
"""Node vocabulary handed to the evaluator by the parser.

``repr()`` gives a compact debug form, ``str()`` renders the node back to
source text (used by ``Function.inspect`` and the ``ast`` CLI command).
"""

# Base classes
class Node:
    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__repr__()

class Statement(Node): pass
class Expression(Node): pass

class Program(Node):
    def __init__(self, statements=None):
        self.statements = list(statements or [])

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"

    def __str__(self):
        return "".join(str(s) for s in self.statements)

# Statement Nodes
class LetStatement(Statement):
    def __init__(self, name, value):
        self.name = name; self.value = value

    def __repr__(self):
        return f"LetStatement(name={self.name}, value={self.value!r})"

    def __str__(self):
        return f"let {self.name} = {self.value};"

class ReturnStatement(Statement):
    def __init__(self, return_value):
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value!r})"

    def __str__(self):
        return f"return {self.return_value};"

class ExpressionStatement(Statement):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression!r})"

    def __str__(self):
        return str(self.expression)

class BlockStatement(Statement):
    def __init__(self, statements=None):
        self.statements = list(statements or [])

    def __repr__(self):
        return f"BlockStatement(statements={len(self.statements)})"

    def __str__(self):
        return "".join(str(s) for s in self.statements)

# Expression Nodes
class Identifier(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Identifier('{self.value}')"

    def __str__(self):
        return self.value

class IntegerLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"IntegerLiteral({self.value})"

    def __str__(self):
        return str(self.value)

class Boolean(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Boolean({self.value})"

    def __str__(self):
        return "true" if self.value else "false"

class PrefixExpression(Expression):
    def __init__(self, operator, right):
        self.operator = operator; self.right = right

    def __repr__(self):
        return f"PrefixExpression(operator='{self.operator}', right={self.right!r})"

    def __str__(self):
        return f"({self.operator}{self.right})"

class InfixExpression(Expression):
    def __init__(self, left, operator, right):
        self.left = left; self.operator = operator; self.right = right

    def __repr__(self):
        return f"InfixExpression(left={self.left!r}, operator='{self.operator}', right={self.right!r})"

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"

class IfExpression(Expression):
    def __init__(self, condition, consequence, alternative=None):
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative  # Optional BlockStatement

    def __repr__(self):
        return f"IfExpression(condition={self.condition!r}, has_alternative={self.alternative is not None})"

    def __str__(self):
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out
