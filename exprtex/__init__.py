'''
exprtex: latex markup from math expressions
'''

__version__ = "0.1.0"

from .dispatch import latexraw, render
from .errors import (ArrayShapeError, ConfigurationError, ExprParseError,
                     UnsupportedInputError, UnsupportedOperationError)
from .expr import Expr, LaTeXString, Symbol, call
from .formatters import (FancyNumberFormatter, NumberFormatter, PlainNumberFormatter,
                         PrintfNumberFormatter, StyledNumberFormatter)
from .options import make_options
from .parser import parse
