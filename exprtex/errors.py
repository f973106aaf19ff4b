'''
Exceptions raised while turning expressions into latex
'''


class ExprParseError(ValueError):
    """
    Indicate text which could not be parsed into an expression.
    """
    pass


class UnsupportedOperationError(Exception):
    """
    Indicate an expression head or operator the renderer has no rule for.
    """
    pass


class UnsupportedInputError(TypeError):
    """
    Indicate a value of a type which cannot be rendered.
    """
    pass


class ArrayShapeError(ValueError):
    """
    Indicate an array which is ragged or has more than two dimensions.
    """
    pass


class ConfigurationError(ValueError):
    """
    Indicate an unknown or malformed rendering option.
    """
    pass
