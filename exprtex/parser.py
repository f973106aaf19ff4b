"""
Parser for math expressions

Uses pyparsing to parse.  Main function is parse(), which returns an
expression tree (Expr), or the bare leaf (number or Symbol) for input like
"2" or "x".

The syntax is the usual infix one, with ^ for powers, f(x, y) for calls,
x[i] for indexing, and [a, b] / [a b; c d] for array literals.
"""

from pyparsing import (
    Word, Literal, CaselessLiteral, Regex, ZeroOrMore, OneOrMore, MatchFirst,
    Optional, Forward, Group, Suppress, Combine, StringEnd, ParserElement, nums
)

from .expr import Expr, Symbol, call

# array literals are tried as [a, b] first and then as rows, which re-parses
# every nested bracket without memoization
ParserElement.enable_packrat(None)

#-----------------------------------------------------------------------------

# longest first, so that e.g. "<=" is not read as "<"
COMPARISON_OPERATORS = ["===", "==", "!=", "<=", ">=", "<", ">",
                        "≤", "≥", "≠", "≈", "∈", "∉", "⊆", "⊂"]
SUM_OPERATORS = ["+", "-", "±", "∓"]
PRODUCT_OPERATORS = ["//", "*", "/", "÷", "%", "⋅", "×"]
UNARY_OPERATORS = ["-", "+", "!", "√", "∛"]


def eval_number(parse_result):
    """
    Create an int or float out of the number text.

    e.g. '7.13e3' ->  7130.0, '42' -> 42
    """
    text = parse_result[0]
    if any(k in text for k in ".eE"):
        return float(text)
    return int(text)


def eval_identifier(parse_result):
    return Symbol(parse_result[0])


def eval_function(parse_result):
    """
    Name followed by its group of arguments: [ 'f', [ x, y ] ] -> f(x, y)
    """
    return call(parse_result[0], *parse_result[1])


def eval_paren(parse_result):
    """
    Parenthesis around a single expression disappear; anything else is a tuple.

    (a) -> a, (a, b) -> tuple(a, b), (a,) -> tuple(a)
    """
    items = list(parse_result[0])
    if len(items) == 1:
        return items[0]
    if items and type(items[-1]) is str:	# trailing comma
        items.pop()
    return Expr("tuple", *items)


def binary_in_row(instring, loc, tokens):
    '''
    Inside array rows "a -b" is two cells, while "a - b" and "a-b" subtract.
    '''
    while instring[loc].isspace():
        loc += 1
    end = loc + len(tokens[0])
    spaced_before = loc > 0 and instring[loc - 1].isspace()
    spaced_after = end < len(instring) and instring[end].isspace()
    return spaced_after or not spaced_before


def eval_vect(parse_result):
    return Expr("vect", *parse_result)


def eval_grid(parse_result):
    """
    Whitespace separated cells and semicolon separated rows.

    [a] -> vect(a), [a b] -> hcat(a, b), [a; b] -> vcat(a, b),
    [a b; c d] -> vcat(row(a, b), row(c, d))
    """
    rows = [list(k) for k in parse_result]
    if not rows:
        return Expr("vect")
    if len(rows) == 1:
        if len(rows[0]) == 1:
            return Expr("vect", rows[0][0])
        return Expr("hcat", *rows[0])
    return Expr("vcat", *[k[0] if len(k) == 1 else Expr("row", *k) for k in rows])


def eval_postfix(parse_result):
    """
    Indexing, possibly repeated: [ x, [ i ], [ j, k ] ] -> ref(ref(x, i), j, k)
    """
    result = parse_result[0]
    for index in parse_result[1:]:
        result = Expr("ref", result, *index)
    return result


def eval_power(parse_result):
    """
    Base and (optional) exponent; the grammar already nests a^b^c as a^(b^c).
    """
    if len(parse_result) == 1:
        return parse_result[0]
    return call("^", parse_result[0], parse_result[1])


def eval_unary(parse_result):
    """
    Unary operator; a minus sign directly on a number literal becomes a negative number.
    """
    op, operand = parse_result[0], parse_result[1]
    if op == "-" and type(operand) in (int, float):
        return -operand
    return call(op, operand)


def chain_closure(nary_op):
    '''
    Make a parse action folding [ a, op, b, op, c ... ] left to right.

    Runs of nary_op are collected into a single call: a+b+c -> +(a, b, c),
    while a+b-c -> -(+(a, b), c).
    '''
    def eval_chain(parse_result):
        result = parse_result[0]
        last_op = None
        for op, operand in zip(parse_result[1::2], parse_result[2::2]):
            if op == nary_op and last_op == nary_op:
                result.args.append(operand)
            else:
                result = call(op, result, operand)
            last_op = op
        return result
    return eval_chain


def eval_comparison(parse_result):
    """
    a < b -> <(a, b); chains a < b <= c become a single comparison node.
    """
    if len(parse_result) == 1:
        return parse_result[0]
    if len(parse_result) == 3:
        return call(parse_result[1], parse_result[0], parse_result[2])
    return Expr("comparison", *[Symbol(k) if type(k) is str else k for k in parse_result])


def logical_closure(head):
    '''
    Make a parse action folding [ a, b, c ] into head(head(a, b), c)
    '''
    def eval_logical(parse_result):
        result = parse_result[0]
        for operand in parse_result[1:]:
            result = Expr(head, result, operand)
        return result
    return eval_logical


def eval_ternary(parse_result):
    if len(parse_result) == 1:
        return parse_result[0]
    return Expr("if", *parse_result)


def eval_assignment(parse_result):
    if len(parse_result) == 1:
        return parse_result[0]
    return Expr("=", parse_result[0], parse_result[1])


class ParseAugmenter(object):
    """
    Holds the data for a particular parse.

    Retains the `math_expr` and eventually holds the resulting tree.
    """
    def __init__(self, math_expr):
        """
        Create the ParseAugmenter for a given math expression string.

        Do the parsing later, when called like `OBJ.parse_algebra()`.
        """
        self.math_expr = math_expr
        self.tree = None

    def parse_algebra(self):
        """
        Parse an algebraic expression into a tree.

        Store an Expr (or a bare leaf) in `self.tree`, with nesting reflecting
        parenthesis and order of operations.  Raises pyparsing.ParseException
        on malformed input.
        """
        # 0.33 or 7 or .34 or 16.
        number_part = Word(nums)
        inner_number = (number_part + Optional("." + Optional(number_part))) | ("." + number_part)
        plus_minus = Literal('+') | Literal('-')
        exponent = CaselessLiteral("e") + Optional(plus_minus) + number_part
        # pyparsing allows spaces between tokens--`Combine` prevents that.
        number = Combine(inner_number + Optional(exponent))
        number.set_parse_action(eval_number)

        # Predefine recursive variables.
        expr = Forward()
        cell = Forward()
        unary = Forward()

        # Names start with a (unicode) letter or underscore, and may carry digits and combining accents.
        inner_varname = Regex(r"[^\W\d][\w\u0300-\u036f\u20d7]*|\u221e")
        varname = inner_varname.copy().set_parse_action(eval_identifier)

        expr_list = expr + ZeroOrMore(Suppress(",") + expr)

        function = inner_varname + Suppress("(") + Group(Optional(expr_list)) + Suppress(")")
        function.set_parse_action(eval_function)

        paren = Suppress("(") + Group(Optional(expr_list) + Optional(Literal(","))) + Suppress(")")
        paren.set_parse_action(eval_paren)

        # [a, b, c] needs at least one comma; everything else is rows of cells
        vect_body = expr + OneOrMore(Suppress(",") + expr) + Optional(Suppress(","))
        vect_body.set_parse_action(eval_vect)
        row = Group(OneOrMore(cell))
        grid_body = Optional(row + ZeroOrMore(Suppress(";") + row))
        grid_body.set_parse_action(eval_grid)
        array = Suppress("[") + (vect_body | grid_body) + Suppress("]")

        atom = number | function | varname | paren | array

        postfix = atom + ZeroOrMore(Group(Suppress("[") + expr_list + Suppress("]")))
        postfix.set_parse_action(eval_postfix)

        # Do the following in the correct order to preserve order of operation.
        pow_term = postfix + Optional(Suppress("^") + unary)	# right associative: a^b^c = a^(b^c)
        pow_term.set_parse_action(eval_power)

        signed = MatchFirst(Literal(k) for k in UNARY_OPERATORS) + unary
        signed.set_parse_action(eval_unary)
        unary <<= signed | pow_term

        prod_op = MatchFirst(Literal(k) for k in PRODUCT_OPERATORS)
        prod_term = unary + ZeroOrMore(prod_op + unary)		# 7 * 5 / 4
        prod_term.set_parse_action(chain_closure("*"))

        def operator_levels(sum_op):
            """
            Sums up to assignment, on top of prod_term.  Built twice: for
            expressions, and for array cells where "a -b" separates cells.
            """
            sum_term = prod_term + ZeroOrMore(sum_op + prod_term)	# -5 + 4 - 3
            sum_term.set_parse_action(chain_closure("+"))

            comp_op = MatchFirst(Literal(k) for k in COMPARISON_OPERATORS)
            comp_term = sum_term + ZeroOrMore(comp_op + sum_term)	# a < b <= c
            comp_term.set_parse_action(eval_comparison)

            and_term = comp_term + ZeroOrMore(Suppress("&&") + comp_term)
            and_term.set_parse_action(logical_closure("&&"))

            or_term = and_term + ZeroOrMore(Suppress("||") + and_term)
            or_term.set_parse_action(logical_closure("||"))

            ternary = or_term + Optional(Suppress("?") + expr + Suppress(":") + expr)
            ternary.set_parse_action(eval_ternary)

            assignment = Forward()
            assignment <<= ternary + Optional(Suppress("=") + assignment)	# a = b = c is a = (b = c)
            assignment.set_parse_action(eval_assignment)
            return assignment

        sum_op = MatchFirst(Literal(k) for k in SUM_OPERATORS)
        cell_sum_op = sum_op.copy().add_condition(binary_in_row, call_during_try=True)

        # Finish the recursion.
        expr <<= operator_levels(sum_op)
        cell <<= operator_levels(cell_sum_op)
        self.tree = (expr + StringEnd()).parse_string(self.math_expr)[0]
        return self.tree


def parse(math_expr):
    '''
    Parse math_expr into an expression tree.  Raises pyparsing.ParseException if malformed.
    '''
    return ParseAugmenter(math_expr).parse_algebra()
