"""
Outcomes passed between resolvers, the matcher and the listener.
A failed rule is ordinary control flow, so nothing here raises.
"""

# --- Failure reasons ---
LITERAL_MISMATCH = 'literal_mismatch'
UNREGISTERED_SYMBOL = 'unregistered_symbol'
NO_MATCHING_REFERENCE = 'no_matching_reference'
AMBIGUOUS_REFERENCE = 'ambiguous_reference'
UNKNOWN_PHRASE = 'unknown_phrase'
INPUT_REMAINING = 'input_remaining'

EMPTY_INPUT = 'empty_input'
UNKNOWN_VERB = 'unknown_verb'
NO_RULE_MATCHED = 'no_rule_matched'


class Resolved:
    ok = True

    def __init__(self, value, position):
        self.value = value
        self.position = position

    def __repr__(self):
        return f"Resolved({self.value!r}, position={self.position})"


class Failed:
    ok = False

    def __init__(self, reason, details=None):
        self.reason = reason
        self.details = details or {}

    def __repr__(self):
        return f"Failed({self.reason!r}, {self.details!r})"


class Match:
    """Result of trying one rule against the input."""

    def __init__(self, rule, ok, params=(), reason=None, details=None, leftover=()):
        self.rule = rule
        self.ok = ok
        self.params = tuple(params)
        self.reason = reason
        self.details = details or {}
        self.leftover = list(leftover)

    @classmethod
    def success(cls, rule, params):
        return cls(rule, True, params)

    @classmethod
    def failure(cls, rule, reason, details=None, leftover=()):
        return cls(rule, False, reason=reason, details=details, leftover=leftover)

    def __repr__(self):
        if self.ok:
            return f"Match({self.rule.pattern!r}, params={self.params!r})"
        return f"Match({self.rule.pattern!r}, failed={self.reason!r})"
