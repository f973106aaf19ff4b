"""
Unicode to latex substitution, and subscript handling for identifiers.

Characters are looked up with pylatexenc's encoder.  Its built-in table is
written for text mode, so a few math spellings are layered over it, and
\\ensuremath{...} wrappers are dropped since the output is always maths.
"""

import re

from pylatexenc.latexencode import (RULE_DICT, UnicodeToLatexConversionRule,
                                    UnicodeToLatexEncoder)

#-----------------------------------------------------------------------------

GREEK = ("alpha beta gamma delta epsilon varepsilon zeta eta theta "
         "vartheta iota kappa lambda mu nu xi pi rho sigma tau upsilon "
         "phi varphi chi psi omega").split()

# capital greek letters which have their own latex macro
GREEK_CAPITALS = "Gamma Delta Theta Lambda Xi Pi Sigma Upsilon Phi Psi Omega".split()

# math spellings which take precedence over pylatexenc's defaults
MATH_OVERRIDES = {
    'ϵ': r'\epsilon', 'ε': r'\varepsilon', 'ϕ': r'\phi', 'φ': r'\varphi',
    'ϑ': r'\vartheta', 'ϱ': r'\varrho', 'ϖ': r'\varpi', 'ς': r'\varsigma',
    '±': r'\pm', '∓': r'\mp', '×': r'\times', '÷': r'\div', '⋅': r'\cdot',
    '≤': r'\leq', '≥': r'\geq', '≠': r'\neq', '≈': r'\approx', '≡': r'\equiv',
    '∈': r'\in', '∉': r'\notin', '⊂': r'\subset', '⊆': r'\subseteq',
    '√': r'\surd', '∞': r'\infty', 'ħ': r'\hbar', 'ℏ': r'\hbar',
    'ℝ': r'\mathbb{R}', 'ℂ': r'\mathbb{C}', 'ℕ': r'\mathbb{N}', 'ℤ': r'\mathbb{Z}',
    'ℚ': r'\mathbb{Q}',
}

ENCODER = UnicodeToLatexEncoder(
    conversion_rules=[
        UnicodeToLatexConversionRule(rule_type=RULE_DICT,
                                     rule=dict((ord(k), v) for k, v in MATH_OVERRIDES.items())),
        'defaults',
    ],
    non_ascii_only=True,
    replacement_latex_protection='none',
    unknown_char_policy='keep',
    unknown_char_warning=False,
)

# combining characters wrap the preceding (already substituted) character
COMBINING_ACCENTS = {
    '\u0302': 'hat',
    '\u0303': 'tilde',
    '\u0304': 'bar',
    '\u0307': 'dot',
    '\u0308': 'ddot',
    '\u20d7': 'vec',
}

ENDS_IN_MACRO = re.compile(r"\\[A-Za-z]+$")
ENSUREMATH = re.compile(r"\\ensuremath\{((?:[^{}]|\{[^{}]*\})*)\}")
BRACED_MACRO = re.compile(r"^\{(\\[A-Za-z]+)\}$")


def char2latex(char):
    '''
    latex for a single character, in math mode
    '''
    latex = ENCODER.unicode_to_latex(char)
    latex = ENSUREMATH.sub(r"\1", latex)
    return BRACED_MACRO.sub(r"\1", latex)


def unicode2latex(text):
    '''
    Replace unicode math characters in text with latex commands.

    Pure and total: characters without a latex equivalent are kept as they are.
    '''
    if text.isascii():
        return text
    out = []
    for char in text:
        if char in COMBINING_ACCENTS and out:
            out[-1] = r"\%s{%s}" % (COMBINING_ACCENTS[char], out[-1])
            continue
        latex = char if char.isascii() else char2latex(char)
        if out and ENDS_IN_MACRO.search(out[-1]) and latex[:1].isascii() and latex[:1].isalpha():
            out[-1] += "{}"
        out.append(latex)
    return "".join(out)


LETTER_NAMES = set(GREEK + GREEK_CAPITALS + ['hbar', 'infty'])


def enrich_varname(varname, greek=True):
    """
    Prepend a backslash if we're given a greek character, otherwise escape underscores.
    """
    if greek and varname in LETTER_NAMES:
        return r"\{letter}".format(letter=varname)
    return varname.replace("_", r"\_")


def convert_subscript(varname, greek=True):
    '''
    Rewrite an identifier like 'a_b' as 'a_{b}'; underscores after the first are escaped.

    With greek=True, spelled out greek letters become macros ('theta_0' -> '\\theta_{0}').
    '''
    first, _, second = varname.partition("_")
    if first and second:
        # Then 'a_b' must become 'a_{b}'
        return r"{a}_{{{b}}}".format(a=enrich_varname(first, greek), b=enrich_varname(second, greek))
    return enrich_varname(varname, greek)
