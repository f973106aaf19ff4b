"""
Expression trees, identifiers and finished LaTeX strings.

An `Expr` is a head tag plus an ordered list of arguments.  For "call" nodes
the first argument is the operator or function name, e.g.

    x/(y+x)  ->  Expr("call", Symbol("/"), Symbol("x"),
                      Expr("call", Symbol("+"), Symbol("y"), Symbol("x")))
"""


class Symbol(str):
    '''
    An identifier or operator name.  Distinct from plain text, which gets parsed.
    '''
    __slots__ = ()

    def __repr__(self):
        return "Symbol(%s)" % str.__repr__(self)


class LaTeXString(str):
    '''
    Text which is already finished LaTeX; rendering it again returns it unchanged.
    '''
    __slots__ = ()

    def __repr__(self):
        return "L%s" % str.__repr__(self)


class Expr(object):
    '''
    Expression tree node: head tag and argument list.
    '''
    def __init__(self, head, *args):
        self.head = head
        self.args = list(args)

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return self.head == other.head and self.args == other.args

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "Expr(%r%s)" % (self.head, "".join(", %r" % k for k in self.args))

    @property
    def operator(self):
        '''
        Function or operator name of a call node (None otherwise)
        '''
        if self.head == "call" and self.args:
            return self.args[0]
        return None


def call(op, *args):
    '''
    Build a call node, e.g. call("+", "a", "b") for a + b.  Plain str arguments become Symbols.
    '''
    args = [Symbol(k) if type(k) is str else k for k in args]
    return Expr("call", Symbol(op), *args)
