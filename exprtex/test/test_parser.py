from pyparsing import ParseBaseException

from exprtex.expr import Expr, Symbol, call
from exprtex.parser import ParseAugmenter, parse

#-----------------------------------------------------------------------------
# unit tests

import unittest

class Test_parse(unittest.TestCase):

    def test_leaves(self):
        assert parse("x") == Symbol("x")
        assert isinstance(parse("x"), Symbol)
        assert parse("42") == 42
        assert isinstance(parse("42"), int)
        assert parse("2.5") == 2.5
        assert parse("1e3") == 1000.0
        assert parse(".5") == 0.5

    def test_unicode_names(self):
        assert parse("α_1 + x̂") == call("+", "α_1", "x̂")

    def test_sum_chains(self):
        assert parse("a+b+c") == call("+", "a", "b", "c")
        assert parse("a+b-c") == call("-", call("+", "a", "b"), "c")
        assert parse("a-b+c") == call("+", call("-", "a", "b"), "c")

    def test_product_chains(self):
        assert parse("a*b*c") == call("*", "a", "b", "c")
        assert parse("a*b/c") == call("/", call("*", "a", "b"), "c")
        assert parse("a/b*c") == call("*", call("/", "a", "b"), "c")
        assert parse("(a*b)*c") == call("*", call("*", "a", "b"), "c")

    def test_precedence(self):
        assert parse("a+b*c") == call("+", "a", call("*", "b", "c"))
        assert parse("a*b^c") == call("*", "a", call("^", "b", "c"))

    def test_power_right_associative(self):
        assert parse("a^b^c") == call("^", "a", call("^", "b", "c"))
        assert parse("x^-1") == call("^", "x", -1)

    def test_unary(self):
        assert parse("-2") == -2
        assert parse("-x") == call("-", "x")
        assert parse("-x^2") == call("-", call("^", "x", 2))
        assert parse("-2^2") == call("-", call("^", 2, 2))
        assert parse("!a") == call("!", "a")

    def test_calls(self):
        assert parse("f(x, y)") == call("f", "x", "y")
        assert parse("f()") == call("f")
        assert parse("sin(x+1)") == call("sin", call("+", "x", 1))

    def test_parens_and_tuples(self):
        assert parse("(x)") == Symbol("x")
        assert parse("(a, b)") == Expr("tuple", Symbol("a"), Symbol("b"))
        assert parse("(a,)") == Expr("tuple", Symbol("a"))

    def test_arrays(self):
        a, b, c, d = [Symbol(k) for k in "abcd"]
        assert parse("[a, b]") == Expr("vect", a, b)
        assert parse("[a]") == Expr("vect", a)
        assert parse("[]") == Expr("vect")
        assert parse("[a b]") == Expr("hcat", a, b)
        assert parse("[a; b]") == Expr("vcat", a, b)
        assert parse("[a b; c d]") == Expr("vcat", Expr("row", a, b), Expr("row", c, d))

    def test_signed_cells(self):
        a, b, c = [Symbol(k) for k in "abc"]
        assert parse("[a -b]") == Expr("hcat", a, call("-", "b"))
        assert parse("[1 -2; 3 +4]") == Expr("vcat", Expr("row", 1, -2), Expr("row", 3, call("+", 4)))
        assert parse("[a - b]") == Expr("vect", call("-", "a", "b"))
        assert parse("[a-b c]") == Expr("hcat", call("-", "a", "b"), c)
        assert parse("[a -b, c]") == Expr("vect", call("-", "a", "b"), c)
        assert parse("[(a -b) c]") == Expr("hcat", call("-", "a", "b"), c)
        assert parse("a -b") == call("-", "a", "b")

    def test_indexing(self):
        assert parse("x[i]") == Expr("ref", Symbol("x"), Symbol("i"))
        assert parse("A[i, j]") == Expr("ref", Symbol("A"), Symbol("i"), Symbol("j"))

    def test_comparisons(self):
        assert parse("a == b") == call("==", "a", "b")
        assert parse("a <= b") == call("<=", "a", "b")
        assert parse("a < b <= c") == Expr("comparison", Symbol("a"), Symbol("<"), Symbol("b"),
                                           Symbol("<="), Symbol("c"))

    def test_assignment(self):
        assert parse("y = x + 1") == Expr("=", Symbol("y"), call("+", "x", 1))
        assert parse("a = b = c") == Expr("=", Symbol("a"), Expr("=", Symbol("b"), Symbol("c")))

    def test_logic_and_ternary(self):
        assert parse("a && b || c") == Expr("||", Expr("&&", Symbol("a"), Symbol("b")), Symbol("c"))
        assert parse("c ? a : b") == Expr("if", Symbol("c"), Symbol("a"), Symbol("b"))

    def test_malformed(self):
        for bad in ["x/(y+", "2x", "a +", "f(x", "[a, b"]:
            with self.assertRaises(ParseBaseException):
                parse(bad)

    def test_augmenter_keeps_tree(self):
        pa = ParseAugmenter("x^2")
        tree = pa.parse_algebra()
        assert pa.tree == tree == call("^", "x", 2)
