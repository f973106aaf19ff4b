"""
Latex for a single expression node, given its already rendered children.

latexoperation() is called by the tree walker once all the arguments of a
node have been rendered.  Alongside the arguments it gets `prev_op`, the
operator each argument came from (None for leaves), which is all it needs to
decide about parenthesis.
"""

import numbers
from fractions import Fraction

from .errors import UnsupportedOperationError
from .expr import Symbol

#-----------------------------------------------------------------------------

# Binding strength of the arithmetic operators.  Operators not listed here
# (function calls, indexing, ...) never force parenthesis.
PRECEDENCE = {
    '+': 1, '-': 1, '±': 1, '∓': 1,
    '*': 2, '/': 2, '//': 2, '÷': 2, '%': 2, '⋅': 2, '×': 2,
    '^': 3,
}

INFIX = {
    '±': r'\pm',
    '∓': r'\mp',
    '÷': r'\div',
    '%': r'\bmod',
    '⋅': r'\cdot',
    '×': r'\times',
}

COMPARISON = {
    '==': '=',
    '===': r'\equiv',
    '!=': r'\neq',
    '≠': r'\neq',
    '<': '<',
    '>': '>',
    '<=': r'\leq',
    '≤': r'\leq',
    '>=': r'\geq',
    '≥': r'\geq',
    '≈': r'\approx',
    '∈': r'\in',
    '∉': r'\notin',
    '⊆': r'\subseteq',
    '⊂': r'\subset',
}

# functions with a latex macro of their own
FUNCTIONS = dict((name, "\\" + name) for name in (
    "sin cos tan cot sec csc sinh cosh tanh coth arcsin arccos arctan "
    "log ln lg det dim ker deg gcd min max sup inf arg").split())
FUNCTIONS.update({
    'asin': r'\arcsin',
    'acos': r'\arccos',
    'atan': r'\arctan',
    'log10': r'\log_{10}',
    'log2': r'\log_{2}',
})

OPERATORS = set(PRECEDENCE) | set(COMPARISON) | set(['!'])


def needs_parens(tag, parent, strict=False):
    '''
    True if an argument which came from operator `tag` must be wrapped when used by `parent`.

    strict: also wrap operators binding exactly as strongly as the parent
    (right hand side of a subtraction, base of a power).
    '''
    if tag not in PRECEDENCE or parent not in PRECEDENCE:
        return False
    if strict:
        return PRECEDENCE[tag] <= PRECEDENCE[parent]
    return PRECEDENCE[tag] < PRECEDENCE[parent]


def parenthesize(latex):
    return r"\left( {} \right)".format(latex)


def is_signed_literal(value):
    '''
    Numbers which need parenthesis as the base of a power: negative, complex, or fractions
    '''
    if isinstance(value, bool):
        return False
    if isinstance(value, Fraction):
        return value.denominator != 1 or value < 0
    if isinstance(value, numbers.Real):
        return value < 0
    return isinstance(value, numbers.Complex)


def render_function(name, latex, tags, options):
    """
    Function calls: special forms first, then known macros, then \\mathrm{name}.
    """
    if len(latex) == 1:
        arg = latex[0]
        if name in ("sqrt", "√"):
            return r"\sqrt{%s}" % arg
        if name in ("cbrt", "∛"):
            return r"\sqrt[3]{%s}" % arg
        if name == "abs":
            return r"\left|%s\right|" % arg
        if name == "norm":
            return r"\left\|%s\right\|" % arg
        if name == "exp":
            return "e^{%s}" % arg
        if name == "factorial":
            if tags[0] in PRECEDENCE:
                arg = parenthesize(arg)
            return "%s!" % arg

    if name in FUNCTIONS:
        fname = FUNCTIONS[name]
    elif isinstance(name, Symbol):
        fname = r"\mathrm{%s}" % name.replace("_", r"\_")
    else:
        fname = name
    return r"%s%s" % (fname, parenthesize(", ".join(latex)))


def render_call(op, operands, latex, tags, options):
    """
    Operators and function calls.

    operands are the arguments as handed to the node (leaves still raw, so
    that e.g. a negative base can be detected), latex their rendered form.
    """
    n = len(latex)

    if op in ("/", "//") and n == 2:
        # the fraction bar delimits both parts, no parenthesis ever
        return r"\frac{%s}{%s}" % (latex[0], latex[1])

    if op == "*" and n >= 2:
        sep = r" \cdot " if options.cdot else " "
        return sep.join(parenthesize(k) if needs_parens(t, "*") else k
                        for k, t in zip(latex, tags))

    if op == "+" and n >= 2:
        return " + ".join(latex).replace("+ -", "- ")

    if op in ("-", "+") and n == 1:
        arg = parenthesize(latex[0]) if needs_parens(tags[0], op, strict=True) else latex[0]
        return op + arg

    if op == "-" and n == 2:
        rhs = parenthesize(latex[1]) if needs_parens(tags[1], "-", strict=True) else latex[1]
        return "%s - %s" % (latex[0], rhs)

    if op == "^" and n == 2:
        base = latex[0]
        if needs_parens(tags[0], "^", strict=True) or is_signed_literal(operands[0]):
            base = parenthesize(base)
        return "%s^{%s}" % (base, latex[1])

    if op in INFIX and n == 2:
        strict = op in ("÷", "%")
        lhs = parenthesize(latex[0]) if needs_parens(tags[0], op) else latex[0]
        rhs = parenthesize(latex[1]) if needs_parens(tags[1], op, strict=strict) else latex[1]
        return r"%s %s %s" % (lhs, INFIX[op], rhs)

    if op in COMPARISON and n == 2:
        return "%s %s %s" % (latex[0], COMPARISON[op], latex[1])

    if op == "!" and n == 1:
        return r"\neg %s" % latex[0]

    if op in OPERATORS:
        raise UnsupportedOperationError("[exprtex.operation] Error! operator %s cannot take %d operand(s)" % (op, n))

    return render_function(op, latex, tags, options)


def render_cases(latex):
    '''
    if/else as a cases environment
    '''
    lines = [r"%s & \text{if } %s" % (latex[1], latex[0])]
    if len(latex) > 2:
        lines.append(r"%s & \text{otherwise}" % latex[2])
    return "\\begin{cases}\n%s\n\\end{cases}" % " \\\\\n".join(lines)


def latexoperation(head, args, prev_op, options):
    """
    Render one node.

    head    = node head tag ("call", "=", "ref", ...)
    args    = node arguments; already rendered children are LaTeXStrings,
              leaves are as in the tree
    prev_op = per argument, the operator that argument came from, or None
    options = Options

    Returns the latex string.  Raises UnsupportedOperationError for heads
    without a rendering rule.
    """
    from .dispatch import render

    if head == "call":
        op = args[0]
        operands = args[1:]
        latex = [render(k, options) for k in operands]
        return render_call(op, operands, latex, prev_op[1:], options)

    if head == "comparison":
        # alternating operands and operators: a < b <= c
        parts = []
        for i, arg in enumerate(args):
            if i % 2:
                if arg not in COMPARISON:
                    raise UnsupportedOperationError("[exprtex.operation] Error! unknown comparison %s" % arg)
                parts.append(COMPARISON[arg])
            else:
                parts.append(render(arg, options))
        return " ".join(parts)

    latex = [render(k, options) for k in args]

    if head == "=" and len(latex) == 2:
        return "%s = %s" % (latex[0], latex[1])
    if head == "&&" and len(latex) == 2:
        return r"%s \wedge %s" % (latex[0], latex[1])
    if head == "||" and len(latex) == 2:
        return r"%s \vee %s" % (latex[0], latex[1])
    if head == "ref" and latex:
        return r"%s\left[%s\right]" % (latex[0], ", ".join(latex[1:]))
    if head == "tuple":
        return parenthesize(", ".join(latex))
    if head == "block":
        return latex[-1] if latex else ""
    if head == "return":
        return latex[0] if latex else ""
    if head == "if" and len(latex) in (2, 3):
        return render_cases(latex)

    raise UnsupportedOperationError(
        "[exprtex.operation] Error! no latex rule for expression head %r with %d argument(s)" % (head, len(args))
    )
