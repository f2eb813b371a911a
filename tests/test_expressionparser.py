# Source: https://lukaszwrobel.pl/blog/math-parser-part-4-tests/
# Modificado um pouco para atender a implementação atual.
import pytest

from navicalc.evaluator import evaluate

LONG_EXPRESSION = '(( ((2)) + 4))*((5)) - (2 -4 +6 -1 -1- 0 +8) + 2 -4 +6 -1 -1- 0 +8 / ((10/4)) +' * 10 + '1'

@pytest.mark.parametrize('expr, expected', [
    ('2 + 3', 5),
    ('2 * 3', 6),
    ('89', 89),
    ('   12        -  8   ', 4),
    ('142        -9   ', 133),
    ('72+  15', 87),
    (' 12*  4', 48),
    (' 50/10', 5),
    ('2.5', 2.5),
    ('4*2.5 + 8.5+1.5 / 3.0', 19),
    ('67+2', 69),
    (' 2-7', -5),
    ('5*7 ', 35),
    ('8/4', 2),
    ('2 -4 +6 -1 -1- 0 +8', 10),
    ('1 -1   + 2   - 2   +  4 - 4 +    6', 6),
    (' 2*3 - 4*5 + 6/3 ', -12),
    ('1 + -2 * 4 / 2', -3),
    ('2*3*4/8 -   5/2*4 +  6 + 0/3   ', -1),
    ('10/4', 2.5),
    ('(2)', 2),
    ('(5 + 2*3 - 1 + 7 * 8)', 66),
    ('(67 + 2 * 3 - 67 + 2/1 - 7)', 1),
    ('(2) + (17*2-30) * (5)+2 - (8/2)*4', 8),
    ('(((((5)))))', 5),
    ('(( ((2)) + 4))*((5))', 30),
    (LONG_EXPRESSION, 253),
])
def test_case(expr, expected):
    assert evaluate(expr) == pytest.approx(expected)
