"""
Bottom-up rendering of expression trees.

The tree is first rebuilt with array literals (vect/hcat/vcat nodes) turned
into numpy object arrays.  Then every node is rendered after its children,
with a record of the operator each child came from, so latexoperation() can
decide about parenthesis.  The caller's tree is never modified.
"""

import numpy

from .arrays import is_array, latexarray
from .errors import ArrayShapeError
from .expr import Expr, LaTeXString, Symbol
from .operation import latexoperation
from .symbols import unicode2latex

#-----------------------------------------------------------------------------

def object_array(cells, shape):
    '''
    numpy array of the given shape holding cells as they are (no conversion of nested sequences)
    '''
    arr = numpy.empty(shape, dtype=object)
    for index, cell in zip(numpy.ndindex(*shape), cells):
        arr[index] = cell
    return arr


def materialize_arrays(ex):
    """
    Return a copy of ex with every array literal node replaced by an array.

    [a, b]       vect -> shape (2,)
    [a b]        hcat -> shape (1, 2)
    [a; b]       vcat -> shape (2, 1)
    [a b; c d]   vcat of rows -> shape (2, 2)

    Rows of unequal length raise ArrayShapeError.
    """
    if not isinstance(ex, Expr):
        return ex
    args = [materialize_arrays(k) for k in ex.args]

    if ex.head == "vect":
        return object_array(args, (len(args),))
    if ex.head == "hcat":
        return object_array(args, (1, len(args)))
    if ex.head == "vcat":
        rows = [k.args if isinstance(k, Expr) and k.head == "row" else [k] for k in args]
        ncols = len(rows[0]) if rows else 0
        if any(len(row) != ncols for row in rows):
            raise ArrayShapeError("[exprtex.walker] Error! array literal has rows of unequal length %s"
                                  % [len(row) for row in rows])
        return object_array([cell for row in rows for cell in row], (len(rows), ncols))
    return Expr(ex.head, *args)


def operator_tag(ex):
    '''
    The operator a child node came from, as seen by its parent: the first
    argument, when it is a Symbol and the node has more than one argument.
    '''
    if len(ex.args) > 1 and isinstance(ex.args[0], Symbol):
        return ex.args[0]
    return None


def recurse(ex, options):
    """
    Render node ex: children first, then the node itself.
    """
    prev_op = [None] * len(ex.args)
    args = []
    for i, arg in enumerate(ex.args):
        if isinstance(arg, Expr):
            prev_op[i] = operator_tag(arg)
            args.append(recurse(arg, options))
        elif is_array(arg):
            args.append(latexarray(arg, options))
        else:
            args.append(arg)

    latex = latexoperation(ex.head, args, prev_op, options)
    if options.verbose > 1:
        print("[exprtex.walker] %s%r tags=%s -> %s" % (ex.head, tuple(args), prev_op, latex))
    return LaTeXString(latex)


def latexify_expr(ex, options):
    '''
    Render expression tree ex to a LaTeXString.
    '''
    ex = materialize_arrays(ex)
    if is_array(ex):
        # the whole expression is an array literal
        latex = latexarray(ex, options)
    else:
        latex = recurse(ex, options)
    if options.convert_unicode:
        latex = unicode2latex(latex)
    return LaTeXString(latex)
