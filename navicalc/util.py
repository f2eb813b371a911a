import math

from decimal import Decimal

# Acima disso (ou abaixo de 1e-4) o resultado é mostrado em notação científica
NUMBER_EXPONENT_LIMIT = 6

def char_in_range(char, min, max):
    val = ord(char)
    return val >= ord(min) and val <= ord(max)

def char_is_digit(char):
    # Somente ASCII, '٣' ou '²' não são dígitos para nós
    return char_in_range(char, '0', '9')

def strip_spaces(string):
    # @NOTE:
    # Apenas o espaço é removido, \t e \n continuam na string e serão rejeitados pelo tokenizer.
    return string.replace(' ', '')

def format_number(num):
    """Formats a float using the shortest digits that round-trip, switching to
    scientific notation for very large or very small magnitudes."""
    if math.isnan(num):
        return 'NaN'
    elif math.isinf(num):
        return '+Inf' if num > 0 else '-Inf'

    # repr() já nos dá a menor sequência de dígitos que representa o float
    d = Decimal(repr(num)).normalize()
    exponent = d.adjusted()

    if exponent < -4 or exponent >= NUMBER_EXPONENT_LIMIT:
        sign, digits, _ = d.as_tuple()
        digits = ''.join(str(digit) for digit in digits)
        mantissa = digits[0] + ('.' + digits[1:] if len(digits) > 1 else '')

        return f"{'-' if sign else ''}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent):02d}"
    else:
        return f'{d:f}'
