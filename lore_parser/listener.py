from lore_parser.lexer import ARTICLES, normalize
from lore_parser.matcher import match_rule
from lore_parser.outcome import EMPTY_INPUT, NO_RULE_MATCHED, UNKNOWN_VERB

NOT_UNDERSTOOD = "I don't understand."


class Interpretation:
    """What the Listener made of one command, including every rule it tried."""

    def __init__(self, command, words):
        self.command = command
        self.words = words
        self.matched = False
        self.result = None
        self.verb = None
        self.rule = None
        self.params = ()
        self.reason = None
        self.trace = []  # one Match per rule attempted, in order

    def __repr__(self):
        if self.matched:
            return f"Interpretation({self.command!r}, rule={self.rule.pattern!r})"
        return f"Interpretation({self.command!r}, failed={self.reason!r})"


class Listener:
    def __init__(self, grammar, articles=ARTICLES, not_understood=NOT_UNDERSTOOD):
        """
        The Listener is the VERB DISPATCHER.
        It maps a typed command onto the first grammar rule that fits it and
        runs that rule's action. It never prints and never touches the world.
        """
        self.grammar = grammar
        if isinstance(articles, str):
            articles = articles.split()
        self.articles = tuple(articles)
        self.not_understood = not_understood

    def parse(self, command):
        """Returns the matched action's result, or the not-understood message."""
        interpretation = self.interpret(command)
        if interpretation.matched:
            return interpretation.result
        return self.not_understood

    def interpret(self, command):
        words = normalize(command, self.articles)
        interpretation = Interpretation(command, words)

        if not words:
            interpretation.reason = EMPTY_INPUT
            return interpretation

        verbs = self.grammar.verbs_for(words[0])
        if not verbs:
            interpretation.reason = UNKNOWN_VERB
            return interpretation

        # Verbs sharing a word are tried in declaration order, each rule from
        # a fresh start just after the verb
        for verb in verbs:
            for rule in verb.rules:
                match = match_rule(rule, words, 1, self.grammar.resolvers)
                interpretation.trace.append(match)
                if match.ok:
                    interpretation.matched = True
                    interpretation.verb = verb
                    interpretation.rule = rule
                    interpretation.params = match.params
                    interpretation.result = rule.action(*match.params)
                    return interpretation

        interpretation.reason = NO_RULE_MATCHED
        return interpretation
