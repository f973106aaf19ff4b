"""
Top level entry point: latexraw() picks the rendering path by the type of its input.
"""

import numbers

import numpy
from pyparsing import ParseBaseException

from .errors import ExprParseError, UnsupportedInputError
from .expr import Expr, LaTeXString, Symbol, call
from .options import make_options
from .parser import parse
from .symbols import convert_subscript, unicode2latex
from .walker import latexify_expr

#-----------------------------------------------------------------------------

PARSE_ERROR_MESSAGE = """[exprtex] Error! You are trying to create latex-maths from a string that
cannot be parsed as an expression: %r

exprtex will, by default, try to parse any string inputs into expressions
and this parsing has just failed (%s).

If you are passing strings that you want returned verbatim as part of your
input, try making them LaTeXString's first.

If you are trying to make a table with plain text, try passing the keyword
argument latex=False, so that text is not parsed as maths at all."""


def latexraw(*args, **kwargs):
    '''
    Generate latex for args.

    With a single argument, returns a LaTeXString (or a list of them, if the
    argument is a list, tuple or array).  Several arguments are rendered
    independently, and a list is returned.

    Keyword arguments are the rendering options; see exprtex.options.

    Examples:

        latexraw("x/(y+x)")      ->  \\frac{x}{y + x}
        latexraw("x^2")          ->  x^{2}
        latexraw(2 - 3j)         ->  2-3\\textit{i}
        latexraw("x+y", "x*y")   ->  ['x + y', 'x \\cdot y']
    '''
    if not args:
        raise AssertionError("[exprtex] latexraw needs at least one object to render")
    options = make_options(**kwargs)
    value = args[0] if len(args) == 1 else args
    if options.verbose:
        print("[exprtex] rendering %s %r" % (type(value).__name__, value))
    return render(value, options)


def render(value, options):
    """
    Render value with already validated options.

    Raises UnsupportedInputError for values of a type with no latex form.
    """
    if isinstance(value, LaTeXString):
        return value
    if value is None:
        return LaTeXString("")
    if isinstance(value, Expr):
        return latexify_expr(value, options)
    if isinstance(value, Symbol):
        return render_symbol(value, options)
    if isinstance(value, str):
        if len(value) == 1:
            return render_char(value, options)
        return render_text(value, options)
    if isinstance(value, numbers.Number):
        return render_number(value, options)
    if isinstance(value, numpy.ndarray) and value.ndim == 0:
        return render(value.item(), options)
    if isinstance(value, (list, tuple, numpy.ndarray)):
        return [render(k, options) for k in value]
    raise UnsupportedInputError("[exprtex] Error! cannot render objects of type %s" % type(value).__name__)


def render_symbol(value, options):
    name = unicode2latex(value) if options.convert_unicode else str(value)
    return LaTeXString(convert_subscript(name, greek=options.greek_names))


def render_char(value, options):
    return LaTeXString(unicode2latex(value) if options.convert_unicode else value)


def render_text(text, options):
    """
    Parse text and render the resulting expression.
    """
    if not options.latex:
        return LaTeXString(text)
    if text.strip() == "":
        return LaTeXString("")
    try:
        ex = parse(text)
    except ParseBaseException as err:
        raise ExprParseError(PARSE_ERROR_MESSAGE % (text, err)) from err
    return render(ex, options)


def complex_part(x):
    '''
    Real or imaginary part of a complex number, without a trailing .0 when integral
    '''
    x = float(x)
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def render_number(value, options):
    """
    Fractions go through the tree walker as a division, complex numbers get
    an italic i, everything else is up to the number formatter.
    """
    if isinstance(value, numbers.Rational) and not isinstance(value, numbers.Integral):
        if value.denominator == 1:
            return render(value.numerator, options)
        return latexify_expr(call("/", value.numerator, value.denominator), options)
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        sign = "" if value.imag < 0 else "+"
        return LaTeXString("%s%s%s\\textit{i}" % (complex_part(value.real), sign, complex_part(value.imag)))
    return LaTeXString(options.fmt(value))
