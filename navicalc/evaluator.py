import math

from navicalc.errors import InvalidExpressionError, DivisionByZeroError, InvalidOperatorError, InvalidTokenError
from navicalc.parser import (
    TokenType,
    tokenize,
    EXPR_ADD,
    EXPR_SUB,
    EXPR_MUL,
    EXPR_DIV,
    EXPR_PAR_START,
    EXPR_PRIORITY_MAP
)
from navicalc.util import strip_spaces

def apply_operator(op: str, a: float, b: float):
    if op == EXPR_ADD:
        return a + b
    elif op == EXPR_SUB:
        return a - b
    elif op == EXPR_MUL:
        return a * b
    elif op == EXPR_DIV:
        if b == 0:
            raise DivisionByZeroError()

        return a / b
    else:
        raise InvalidOperatorError(f"'{op}'")

def parse_number(text: str):
    try:
        num = float(text)
    except ValueError:
        raise InvalidTokenError(f"'{text}'")

    # float() aceita números gigantes como inf, tratamos como fora do intervalo
    if math.isinf(num):
        raise InvalidTokenError(f"'{text}'")

    return num

class Evaluator:
    def __init__(self, tokens: list):
        self.tokens = tokens
        self.operands = []
        self.operators = []

    def top_operator(self):
        return self.operators[-1] if self.operators else None

    def reduce(self):
        op = self.operators.pop()

        if len(self.operands) < 2:
            raise InvalidExpressionError()

        b = self.operands.pop()
        a = self.operands.pop()
        self.operands.append(apply_operator(op, a, b))

    def insert_operator(self, op: str):
        priority = EXPR_PRIORITY_MAP.get(op, 0)

        # Prioridades iguais também reduzem, todos os operadores são associativos à esquerda
        while self.operators and self.top_operator() != EXPR_PAR_START and EXPR_PRIORITY_MAP.get(self.top_operator(), 0) >= priority:
            self.reduce()

        self.operators.append(op)

    def close_parenthesis(self):
        while self.operators and self.top_operator() != EXPR_PAR_START:
            self.reduce()

        if not self.operators:
            raise InvalidExpressionError('unbalanced parenthesis')

        self.operators.pop()

    def evaluate(self):
        for t in self.tokens:
            if t.is_number():
                self.operands.append(parse_number(t.value))
            elif t.type == TokenType.OPERATOR:
                self.insert_operator(t.value)
            elif t.type == TokenType.PAR_START:
                self.operators.append(EXPR_PAR_START)
            elif t.type == TokenType.PAR_END:
                self.close_parenthesis()

        while self.operators:
            if self.top_operator() == EXPR_PAR_START:
                raise InvalidExpressionError('unbalanced parenthesis')

            self.reduce()

        if len(self.operands) != 1:
            raise InvalidExpressionError()

        return self.operands[0]

def evaluate(expression: str):
    expression = strip_spaces(expression)

    if not expression:
        raise InvalidExpressionError()

    return Evaluator(tokenize(expression)).evaluate()
