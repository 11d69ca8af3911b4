from lore_parser.cursor import EXHAUSTED, TokenCursor
from lore_parser.lexer import LITERAL
from lore_parser.outcome import (
    INPUT_REMAINING,
    LITERAL_MISMATCH,
    UNREGISTERED_SYMBOL,
    Match,
)


def match_rule(rule, words, start, resolvers):
    """
    Tries one rule against the input words, beginning at `start` (the word
    after the verb). Succeeds only when the rule and the input run out
    together; a rule that matches a prefix and leaves words behind fails.
    """
    rule_tokens = TokenCursor(rule.tokens)
    input_words = TokenCursor(words, start)
    params = []

    while rule_tokens.advance() is not EXHAUSTED:
        token = rule_tokens.current()
        word = input_words.current()

        # A. LITERAL: the exact word must be next
        if token.kind == LITERAL:
            if word is EXHAUSTED or word != token.value:
                return Match.failure(rule, LITERAL_MISMATCH, {
                    "expected": token.value,
                    "got": None if word is EXHAUSTED else word,
                }, input_words.remaining())
            input_words.advance()
            continue

        # B. SYMBOL: hand the input over to its resolver
        resolver = resolvers.get(token.value)
        if resolver is None:
            return Match.failure(rule, UNREGISTERED_SYMBOL, {"symbol": token.value},
                                 input_words.remaining())

        outcome = resolver.resolve(input_words.fork())
        if not outcome.ok:
            details = dict(outcome.details, symbol=token.value)
            return Match.failure(rule, outcome.reason, details, input_words.remaining())

        params.append(outcome.value)
        input_words.position = outcome.position

    # C. BOTH SIDES MUST BE USED UP
    if input_words.current() is not EXHAUSTED:
        return Match.failure(rule, INPUT_REMAINING, {}, input_words.remaining())
    return Match.success(rule, params)
