import io

from enum import Enum, auto

from navicalc.errors import InvalidTokenError
from navicalc.util import char_is_digit

EXPR_ADD = '+'
EXPR_SUB = '-'
EXPR_MUL = '*'
EXPR_DIV = '/'
EXPR_POINT = '.'
EXPR_PAR_START = '('
EXPR_PAR_END = ')'

EXPR_OPERATORS = (
    EXPR_ADD,
    EXPR_SUB,
    EXPR_MUL,
    EXPR_DIV
)

EXPR_PRIORITY_MAP = {
    EXPR_ADD: 1,
    EXPR_SUB: 1,
    EXPR_MUL: 2,
    EXPR_DIV: 2
}

class TokenType(Enum):
    NUMBER      = auto()
    OPERATOR    = auto()
    PAR_START   = auto()
    PAR_END     = auto()

class Token:
    def __init__(self, type: TokenType, value: str):
        self.type = type
        self.value = value

    def is_number(self):
        return self.type == TokenType.NUMBER

    def __eq__(self, other):
        return isinstance(other, Token) and self.type == other.type and self.value == other.value

    def __repr__(self):
        return f'Token({self.type.name}, {self.value!r})'

class Parser:
    def __init__(self, inputstr: str):
        self.feed(inputstr)

    def feed(self, inputstr: str):
        self.inputstr = inputstr
        self.index = 0

    def at_start(self):
        return self.index == 0

    def seek(self, delta):
        self.index += delta

    def current_char(self):
        if self.index < 0 or self.index >= len(self.inputstr):
            return None

        return self.inputstr[self.index]

    def prev_char(self):
        return self.inputstr[self.index - 1] if not self.at_start() else None

    def parse(self):
        raise NotImplementedError()

class Tokenizer(Parser):
    def parse(self):
        # Cada parse começa do zero, pode ser chamado novamente sem um feed()
        self.index = 0
        self.tokens = []
        self.buffer = io.StringIO()
        self.after_point = False

        c = self.current_char()

        while c:
            if char_is_digit(c):
                self.buffer.write(c)
            elif c == EXPR_POINT:
                if self.after_point:
                    raise InvalidTokenError('multiple decimal points')

                self.after_point = True
                self.buffer.write(c)
            elif c in EXPR_OPERATORS:
                self.flush_number()

                if c == EXPR_SUB and self.is_unary_position():
                    # O sinal vai junto com o número, não existe token de operador unário
                    self.buffer.write(c)
                else:
                    self.tokens.append(Token(TokenType.OPERATOR, c))
            elif c == EXPR_PAR_START:
                self.flush_number()
                self.tokens.append(Token(TokenType.PAR_START, c))
            elif c == EXPR_PAR_END:
                self.flush_number()
                self.tokens.append(Token(TokenType.PAR_END, c))
            else:
                raise InvalidTokenError(f"'{c}'")

            self.seek(1)
            c = self.current_char()

        self.flush_number()
        self.buffer.close()

        return self.tokens

    def is_unary_position(self):
        prev = self.prev_char()
        return prev is None or prev in EXPR_OPERATORS or prev == EXPR_PAR_START

    def flush_number(self):
        if not self.buffer.tell():
            return

        self.tokens.append(Token(TokenType.NUMBER, self.buffer.getvalue()))
        self.buffer.seek(0)
        self.buffer.truncate(0)
        self.after_point = False

def tokenize(text: str):
    return Tokenizer(text).parse()
