"""
Latex matrix environments for 1-D and 2-D arrays of expressions.
"""

import numpy

from .errors import ArrayShapeError
from .expr import LaTeXString


def is_array(value):
    return isinstance(value, (list, tuple, numpy.ndarray))


def grid_rows(arr, vector="row"):
    '''
    Return the rows (lists of cells) of a 1-D or 2-D array.

    arr    = numpy array, or list/tuple of cells or of equal length rows
    vector = layout for 1-D input, "row" or "column"
    '''
    if isinstance(arr, numpy.ndarray):
        if arr.ndim > 2:
            raise ArrayShapeError("[exprtex.arrays] Error! cannot render %d-dimensional array" % arr.ndim)
        if arr.ndim == 2:
            return [list(k) for k in arr]
        cells = list(arr.reshape(-1))
    elif arr and all(isinstance(k, (list, tuple)) for k in arr):
        ncols = len(arr[0])
        if any(len(k) != ncols for k in arr):
            raise ArrayShapeError("[exprtex.arrays] Error! rows of unequal length %s"
                                  % [len(k) for k in arr])
        return [list(k) for k in arr]
    elif any(isinstance(k, (list, tuple)) for k in arr):
        raise ArrayShapeError("[exprtex.arrays] Error! array mixes rows and single cells: %r" % (arr,))
    else:
        cells = list(arr)

    if vector == "column":
        return [[k] for k in cells]
    return [cells]


def latexarray(arr, options):
    """
    Render arr as a matrix environment.

    Each cell is rendered independently (cells which are arrays themselves
    become nested environments); cells are joined by the column delimiter,
    rows by the row delimiter, and everything wrapped in options.env.
    env="array" gives \\left[\\begin{array}{cc}...\\end{array}\\right].
    """
    from .dispatch import render

    rows = grid_rows(arr, options.vector)
    latex_rows = [[latexarray(cell, options) if is_array(cell) else render(cell, options)
                   for cell in row] for row in rows]

    column_sep = " %s " % options.column_delimiter
    row_sep = " %s\n" % options.row_delimiter
    body = row_sep.join(column_sep.join(row) for row in latex_rows)

    if options.env == "array":
        ncols = max([len(row) for row in latex_rows] or [0])
        latex = "\\left[\n\\begin{array}{%s}\n%s\n\\end{array}\n\\right]" % ("c" * ncols, body)
    else:
        latex = "\\begin{{{env}}}\n{body}\n\\end{{{env}}}".format(env=options.env, body=body)
    return LaTeXString(latex)
