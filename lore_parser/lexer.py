import re
from collections import namedtuple

ARTICLES = ('a', 'an', 'the')

# Token kinds
LITERAL = 'literal'
SYMBOL = 'symbol'

Token = namedtuple('Token', 'kind value')

# A quoted span or a run of non-whitespace
RULE_PART_RE = re.compile(r'".+?"|\S+')
RULE_WORD_RE = re.compile(r'[a-z]+')


def Literal(word):
    return Token(LITERAL, word)


def Symbol(name):
    return Token(SYMBOL, name)


# ==========================================================
# 1. INPUT NORMALIZER
# ==========================================================
def normalize(text, articles=ARTICLES):
    """
    Turns raw player input into a list of lowercase words.
    Articles are dropped wherever they stand alone, e.g.
    'Pick up  the Old key' -> ['pick', 'up', 'old', 'key'].
    """
    if isinstance(text, (list, tuple)):
        text = ' '.join(text)
    skip = set(word.lower() for word in articles)
    return [word for word in text.strip().lower().split() if word not in skip]


# ==========================================================
# 2. RULE COMPILER
# ==========================================================
def compile_rule(pattern):
    """
    Compiles a rule pattern into a tuple of Tokens.

    Quoted parts are literals (one Literal per word), everything else is a
    symbol name: '"up" single "on" single' ->
    (Literal('up'), Symbol('single'), Literal('on'), Symbol('single'))

    A blank pattern compiles to () and only matches when no input is left.
    """
    tokens = []
    for part in RULE_PART_RE.findall(pattern or ''):
        if part.startswith('"') and len(part) > 2 and part.endswith('"'):
            for word in RULE_WORD_RE.findall(part.lower()):
                tokens.append(Literal(word))
        else:
            tokens.append(Symbol(part))
    return tuple(tokens)


def describe_tokens(tokens):
    """Renders tokens back into pattern syntax, for debug output."""
    parts = []
    for token in tokens:
        if token.kind == LITERAL:
            parts.append(f'"{token.value}"')
        else:
            parts.append(token.value)
    return ' '.join(parts) if parts else '[blank]'
