"""
Number formatters: strategy objects turning a number into its latex text.

Pick one with the `fmt` option, either as a formatter instance or as a
printf-style pattern string (which gets wrapped in PrintfNumberFormatter).
"""

import math
import re

from .errors import ConfigurationError

#-----------------------------------------------------------------------------

class NumberFormatter(object):
    '''
    Base class; subclasses implement __call__(number) -> str
    '''
    def __call__(self, number):
        raise NotImplementedError

    def __repr__(self):
        return "%s()" % self.__class__.__name__


class PlainNumberFormatter(NumberFormatter):
    '''
    str() of the number, with infinities and NaN spelled in latex
    '''
    def __call__(self, number):
        if isinstance(number, float) or hasattr(number, "dtype"):
            if math.isinf(number):
                return r"-\infty" if number < 0 else r"\infty"
            if math.isnan(number):
                return r"\mathrm{NaN}"
        return str(number)


class PrintfNumberFormatter(NumberFormatter):
    '''
    Format with a printf-style pattern, e.g. "%.3f"
    '''
    def __init__(self, fmt):
        if "%" not in fmt:
            raise ConfigurationError("[exprtex.formatters] number format %r has no %% conversion" % fmt)
        self.fmt = fmt

    def __call__(self, number):
        try:
            return self.fmt % number
        except (TypeError, ValueError) as err:
            raise ConfigurationError("[exprtex.formatters] Error! cannot format %r with %r: %s"
                                     % (number, self.fmt, err)) from err

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.fmt)


class StyledNumberFormatter(PrintfNumberFormatter):
    '''
    Like PrintfNumberFormatter, but exponential notation is typeset:
    1.5e+03 -> 1.5\\!\\times\\!10^{3}
    '''
    EXPONENT = re.compile(r"^(?P<mantissa>[-+]?[0-9.]+)[eE](?P<exponent>[-+]?[0-9]+)$")

    def __init__(self, fmt="%.4g"):
        super(StyledNumberFormatter, self).__init__(fmt)

    def __call__(self, number):
        text = super(StyledNumberFormatter, self).__call__(number)
        m = self.EXPONENT.match(text)
        if m is None:
            return self.style_mantissa(text)
        mantissa = self.style_mantissa(m.group("mantissa"))
        exponent = int(m.group("exponent"))
        return r"{m}\!\times\!10^{{{e}}}".format(m=mantissa, e=exponent)

    def style_mantissa(self, text):
        return text


class FancyNumberFormatter(StyledNumberFormatter):
    '''
    StyledNumberFormatter plus thousands grouping of the integer part:
    1234567 -> 1\\,234\\,567
    '''
    def __init__(self, fmt="%.4g", thousands_sep=r"\,"):
        super(FancyNumberFormatter, self).__init__(fmt)
        self.thousands_sep = thousands_sep

    def style_mantissa(self, text):
        sign = ""
        if text[:1] in "+-":
            sign, text = text[0], text[1:]
        whole, dot, frac = text.partition(".")
        groups = []
        while len(whole) > 3:
            groups.insert(0, whole[-3:])
            whole = whole[:-3]
        groups.insert(0, whole)
        return sign + self.thousands_sep.join(groups) + dot + frac


def make_formatter(fmt):
    '''
    Resolve the `fmt` option: None, a printf pattern string, or a NumberFormatter
    '''
    if fmt is None:
        return PlainNumberFormatter()
    if isinstance(fmt, NumberFormatter):
        return fmt
    if isinstance(fmt, str):
        return PrintfNumberFormatter(fmt)
    raise ConfigurationError("[exprtex.formatters] cannot use %r as a number formatter" % (fmt,))
