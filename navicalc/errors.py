# Errors module

# Base de todos os erros levantados ao avaliar uma expressão, nunca é levantado diretamente.
class CalcError(Exception):
    message = 'calculation error'

    def __init__(self, detail: str=None):
        self.detail = detail
        super().__init__(f'{self.message}: {detail}' if detail else self.message)

# Utilizado quando a expressão está vazia, desbalanceada ou com operandos/operadores faltando.
class InvalidExpressionError(CalcError):
    message = 'invalid expression'

# Utilizado quando o operando da direita de uma divisão é zero.
class DivisionByZeroError(CalcError):
    message = 'division by zero'

# Utilizado quando a etapa de aplicação recebe um operador desconhecido.
class InvalidOperatorError(CalcError):
    message = 'invalid operator'

# Utilizado quando o tokenizer encontra um caractere ou número inválido.
class InvalidTokenError(CalcError):
    message = 'invalid token in expression'
