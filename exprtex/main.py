#!/usr/bin/env python

import sys
import argparse

from . import __version__
from .dispatch import latexraw
from .errors import ArrayShapeError, ConfigurationError, ExprParseError, UnsupportedOperationError
from .formatters import FancyNumberFormatter, StyledNumberFormatter
from .options import make_options

# -----------------------------------------------------------------------------

NUMBER_STYLES = {
    'plain': None,
    'styled': StyledNumberFormatter,
    'fancy': FancyNumberFormatter,
}

class VAction(argparse.Action):
    def __call__(self, parser, args, values, option_string=None):
        curval = getattr(args, self.dest, 0) or 0
        values=values.count('v')+1
        setattr(args, self.dest, values + curval)

# -----------------------------------------------------------------------------

def make_formatter_option(fmt, style):
    '''
    Combine the --fmt pattern and --number-style choice into a value for the fmt option
    '''
    cls = NUMBER_STYLES[style]
    if cls is None:
        return fmt
    if fmt:
        return cls(fmt)
    return cls()


def CommandLine(args=None, arglist=None):
    '''
    Main command line.  Accepts args, to allow for simple unit testing.

    Prints the latex for each expression on its own line; returns 0, or 1 if
    an expression could not be rendered.
    '''
    help_text = """usage: exprtex [options] expression [expression ...]

Version: {}

""".format(__version__)

    parser = argparse.ArgumentParser(description=help_text, formatter_class=argparse.RawTextHelpFormatter)

    parser.add_argument("expressions", nargs="+", help="math expression(s), e.g. 'x/(y+x)'")
    parser.add_argument('-v', "--verbose", nargs=0, help="increase output verbosity (add more -v to increase versbosity)", action=VAction, dest='verbose')
    parser.add_argument("--fmt", help="printf-style format for numbers, e.g. %%.3f", default=None)
    parser.add_argument("--number-style", help="number formatter", choices=sorted(NUMBER_STYLES), default="plain")
    parser.add_argument("--no-unicode", help="keep unicode characters instead of substituting latex commands", action="store_true")
    parser.add_argument("--greek-names", help="write spelled out greek names (alpha, Omega) as latex macros", action="store_true")
    parser.add_argument("--no-cdot", help="write products with a space instead of \\cdot", action="store_true")
    parser.add_argument("--env", help="latex environment for arrays", default="bmatrix")
    parser.add_argument("--column-vector", help="lay out 1-D arrays as a column", action="store_true")

    if not args:
        args = parser.parse_args(arglist)

    try:
        options = dict(fmt=make_formatter_option(args.fmt, args.number_style),
                       convert_unicode=not args.no_unicode,
                       greek_names=args.greek_names,
                       cdot=not args.no_cdot,
                       env=args.env,
                       vector="column" if args.column_vector else "row",
                       verbose=args.verbose or 0,
                       )
        make_options(**options)
    except ConfigurationError as err:
        print(err, file=sys.stderr)
        return 1

    ret = 0
    for expr in args.expressions:
        try:
            print(latexraw(expr, **options))
        except (ExprParseError, UnsupportedOperationError, ArrayShapeError, ConfigurationError) as err:
            print(err, file=sys.stderr)
            ret = 1
    return ret
