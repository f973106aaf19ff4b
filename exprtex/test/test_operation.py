from exprtex import latexraw
from exprtex.errors import UnsupportedOperationError
from exprtex.expr import Expr, Symbol, call
from exprtex.operation import needs_parens, is_signed_literal

#-----------------------------------------------------------------------------
# unit tests

import unittest

class Test_division(unittest.TestCase):

    def test_frac(self):
        assert latexraw("a/b") == r"\frac{a}{b}"
        assert latexraw("1//2") == r"\frac{1}{2}"

    def test_no_parens_in_frac(self):
        assert latexraw("(a+b)/(c-d)") == r"\frac{a + b}{c - d}"
        assert latexraw("(a^2)/(-b)") == r"\frac{a^{2}}{-b}"
        assert latexraw("x/y/z") == r"\frac{\frac{x}{y}}{z}"


class Test_sums(unittest.TestCase):

    def test_nary_sum(self):
        assert latexraw("a+b+c") == "a + b + c"

    def test_nested_sum_not_parenthesized(self):
        assert latexraw("a + (b + c)") == "a + b + c"
        assert latexraw("a + (b - c)") == "a + b - c"

    def test_plus_minus_collapses(self):
        assert latexraw("a + -b") == "a - b"
        assert latexraw("a + -2") == "a - 2"

    def test_subtraction(self):
        assert latexraw("a - b - c") == "a - b - c"
        assert latexraw("a - (b + c)") == r"a - \left( b + c \right)"
        assert latexraw("a - (b - c)") == r"a - \left( b - c \right)"
        assert latexraw("a - b*c") == r"a - b \cdot c"

    def test_unary_minus(self):
        assert latexraw("-x") == "-x"
        assert latexraw("-(a+b)") == r"-\left( a + b \right)"
        assert latexraw("-(x*y)") == r"-x \cdot y"
        assert latexraw("-x^2") == "-x^{2}"

    def test_pm(self):
        assert latexraw("a ± b") == r"a \pm b"


class Test_products(unittest.TestCase):

    def test_cdot(self):
        assert latexraw("a*b*c") == r"a \cdot b \cdot c"
        assert latexraw("a*b*c", cdot=False) == "a b c"

    def test_sum_operand_parenthesized(self):
        assert latexraw("a*(b+c)") == r"a \cdot \left( b + c \right)"
        assert latexraw("(a-b)*(c+d)") == r"\left( a - b \right) \cdot \left( c + d \right)"

    def test_negated_operand_parenthesized(self):
        assert latexraw("-x*y") == r"\left( -x \right) \cdot y"

    def test_number_times_symbol(self):
        assert latexraw("2*x") == r"2 \cdot x"

    def test_other_infix(self):
        assert latexraw("a % b") == r"a \bmod b"
        assert latexraw("a ÷ (b*c)") == r"a \div \left( b \cdot c \right)"
        assert latexraw("a × b") == r"a \times b"


class Test_powers(unittest.TestCase):

    def test_simple(self):
        assert latexraw("x^2") == "x^{2}"
        assert latexraw("2^x") == "2^{x}"

    def test_sum_base(self):
        assert latexraw("(a+b)^2") == r"\left( a + b \right)^{2}"
        assert latexraw("(a-b)^n") == r"\left( a - b \right)^{n}"

    def test_compound_base(self):
        assert latexraw("(a*b)^2") == r"\left( a \cdot b \right)^{2}"
        assert latexraw("(x^2)^3") == r"\left( x^{2} \right)^{3}"
        assert latexraw("(-x)^2") == r"\left( -x \right)^{2}"

    def test_negative_literal_base(self):
        assert latexraw("(-2)^x") == r"\left( -2 \right)^{x}"

    def test_exponent_braces(self):
        assert latexraw("x^-1") == "x^{-1}"
        assert latexraw("a^(b+c)") == "a^{b + c}"
        assert latexraw("a^b^c") == "a^{b^{c}}"

    def test_function_base(self):
        assert latexraw("sin(x)^2") == r"\sin\left( x \right)^{2}"


class Test_functions(unittest.TestCase):

    def test_known(self):
        assert latexraw("sin(x)") == r"\sin\left( x \right)"
        assert latexraw("log10(x)") == r"\log_{10}\left( x \right)"
        assert latexraw("asin(x)") == r"\arcsin\left( x \right)"

    def test_generic(self):
        assert latexraw("f(x, y)") == r"\mathrm{f}\left( x, y \right)"
        assert latexraw("g()") == r"\mathrm{g}\left(  \right)"
        assert latexraw("foo(x)") == r"\mathrm{foo}\left( x \right)"
        assert latexraw("my_fun(x)") == r"\mathrm{my\_fun}\left( x \right)"

    def test_special_forms(self):
        assert latexraw("sqrt(x+1)") == r"\sqrt{x + 1}"
        assert latexraw("√x") == r"\sqrt{x}"
        assert latexraw("cbrt(x)") == r"\sqrt[3]{x}"
        assert latexraw("abs(x)") == r"\left|x\right|"
        assert latexraw("norm(v)") == r"\left\|v\right\|"
        assert latexraw("exp(x)") == "e^{x}"
        assert latexraw("factorial(n)") == "n!"
        assert latexraw("factorial(n+1)") == r"\left( n + 1 \right)!"


class Test_relations(unittest.TestCase):

    def test_comparison(self):
        assert latexraw("x == y") == "x = y"
        assert latexraw("x <= y") == r"x \leq y"
        assert latexraw("x ≠ y") == r"x \neq y"
        assert latexraw("a < b <= c") == r"a < b \leq c"

    def test_assignment(self):
        assert latexraw("y = a*x + b") == r"y = a \cdot x + b"

    def test_logic(self):
        assert latexraw("a && b") == r"a \wedge b"
        assert latexraw("a || b") == r"a \vee b"
        assert latexraw("!a") == r"\neg a"


class Test_other_heads(unittest.TestCase):

    def test_ref(self):
        assert latexraw("x[i]") == r"x\left[i\right]"
        assert latexraw("A[i, j]") == r"A\left[i, j\right]"

    def test_tuple(self):
        assert latexraw("(a, b)") == r"\left( a, b \right)"

    def test_cases(self):
        expect = "\\begin{cases}\nx & \\text{if } x > 0 \\\\\n-x & \\text{otherwise}\n\\end{cases}"
        assert latexraw("x > 0 ? x : -x") == expect

    def test_subscripts(self):
        assert latexraw("x_1 + x_2") == "x_{1} + x_{2}"

    def test_unknown_head(self):
        with self.assertRaises(UnsupportedOperationError):
            latexraw(Expr("macrocall", Symbol("x")))

    def test_wrong_arity(self):
        with self.assertRaises(UnsupportedOperationError):
            latexraw(call("/", "a"))
        with self.assertRaises(UnsupportedOperationError):
            latexraw(call("^", "a", "b", "c"))


class Test_helpers(unittest.TestCase):

    def test_needs_parens(self):
        assert needs_parens("+", "*")
        assert not needs_parens("*", "*")
        assert needs_parens("*", "^", strict=True)
        assert not needs_parens(None, "*")
        assert not needs_parens("sin", "^", strict=True)
        assert not needs_parens("+", "sin")

    def test_signed_literal(self):
        assert is_signed_literal(-2)
        assert is_signed_literal(1j)
        assert not is_signed_literal(3)
        assert not is_signed_literal(Symbol("x"))
