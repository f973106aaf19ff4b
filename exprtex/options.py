'''
Rendering options, validated once per top-level call and then passed down unchanged.
'''

from collections import namedtuple

from .errors import ConfigurationError
from .formatters import make_formatter

#-----------------------------------------------------------------------------

DEFAULT_OPTIONS = {
    'convert_unicode': True,	# substitute latex commands for unicode characters
    'greek_names': False,	# spelled out greek names (alpha, Omega) become macros
    'fmt': None,		# number formatter, or printf pattern string
    'cdot': True,		# join products with \cdot (else a space)
    'latex': True,		# parse raw text as math; False passes text through verbatim
    'env': "bmatrix",		# environment for arrays
    'column_delimiter': "&",
    'row_delimiter': r"\\",
    'vector': "row",		# layout of 1-D arrays: "row" or "column"
    'verbose': 0,
}

Options = namedtuple("Options", sorted(DEFAULT_OPTIONS))


def make_options(**kwargs):
    '''
    Build an Options tuple from keyword arguments, filling in defaults.
    '''
    unknown = sorted(set(kwargs) - set(DEFAULT_OPTIONS))
    if unknown:
        raise ConfigurationError("[exprtex] unknown option(s) %s; known options are %s"
                                 % (", ".join(unknown), ", ".join(sorted(DEFAULT_OPTIONS))))
    values = dict(DEFAULT_OPTIONS)
    values.update(kwargs)
    if values['vector'] not in ("row", "column"):
        raise ConfigurationError("[exprtex] vector must be 'row' or 'column', not %r" % (values['vector'],))
    values['fmt'] = make_formatter(values['fmt'])
    values['verbose'] = int(values['verbose'] or 0)
    return Options(**values)
