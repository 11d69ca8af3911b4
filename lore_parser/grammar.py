import inspect

import yaml

from lore_parser.errors import GrammarError
from lore_parser.lexer import SYMBOL, compile_rule
from lore_parser.resolvers import ResolverRegistry, build_resolvers


class Rule:
    """
    One accepted phrasing for a verb and the action it triggers.
    The action is called with one value per symbol, in pattern order.
    """

    def __init__(self, pattern, action, action_name=None):
        self.pattern = pattern or ''
        self.tokens = compile_rule(self.pattern)
        self.symbols = tuple(token.value for token in self.tokens if token.kind == SYMBOL)
        self.action = action
        self.action_name = action_name or getattr(action, '__name__', repr(action))
        self._check_arity()

    def _check_arity(self):
        if not callable(self.action):
            raise GrammarError(f"Rule '{self.pattern}': action {self.action_name} is not callable.")
        try:
            signature = inspect.signature(self.action)
        except (TypeError, ValueError):
            # Some builtins have no signature to check
            return
        try:
            signature.bind(*([None] * len(self.symbols)))
        except TypeError:
            raise GrammarError(
                f"Rule '{self.pattern}' has {len(self.symbols)} symbol(s) "
                f"but action {self.action_name}{signature} does not take that many arguments."
            )

    def __repr__(self):
        return f"Rule({self.pattern!r}, {self.action_name})"


class Verb:
    """Synonyms (e.g. put / place) sharing an ordered list of rules."""

    def __init__(self, words, rules):
        for word in words:
            if not isinstance(word, str):
                raise GrammarError(f"Verb word {word!r} must be text (quote it in YAML).")
        self.words = tuple(word.lower() for word in words)
        self.rules = tuple(rules)
        if not self.words:
            raise GrammarError("A verb needs at least one word.")

    def matches(self, word):
        return word in self.words

    def __repr__(self):
        return f"Verb({list(self.words)!r}, {len(self.rules)} rules)"


class Grammar:
    """
    The verb table plus the resolvers for its symbols.
    Built once and handed to a Listener; every symbol is checked here so
    a missing resolver never surfaces in the middle of a game.
    """

    def __init__(self, verbs, resolvers=None):
        self.verbs = tuple(verbs)
        if not isinstance(resolvers, ResolverRegistry):
            resolvers = ResolverRegistry(resolvers)
        self.resolvers = resolvers
        self.validate()

    def validate(self):
        missing = []
        for verb in self.verbs:
            for rule in verb.rules:
                for name in rule.symbols:
                    if name not in self.resolvers and name not in missing:
                        missing.append(name)
        if missing:
            raise GrammarError(f"No resolver registered for symbol(s): {', '.join(missing)}")

    def verbs_for(self, word):
        return [verb for verb in self.verbs if verb.matches(word)]


# ==========================================================
# LOADING
# ==========================================================
def grammar_from_dict(data, actions, world=None):
    """
    Builds a Grammar from a parsed grammar document.
    `actions` maps the action names used in the document to callables.
    """
    if not isinstance(data, dict):
        raise GrammarError("Grammar document must be a mapping with 'symbols' and 'verbs'.")

    registry = build_resolvers(data.get('symbols', {}), world)

    verbs = []
    for index, verb_data in enumerate(data.get('verbs') or []):
        if not isinstance(verb_data, dict):
            raise GrammarError(f"Verb #{index + 1} must be a mapping with 'words' and 'rules'.")
        words = verb_data.get('words') or []
        if isinstance(words, str):
            words = [words]
        if not isinstance(words, list):
            raise GrammarError(f"Verb #{index + 1}: words must be a list, got {words!r}.")

        rules = []
        for rule_data in verb_data.get('rules') or []:
            if not isinstance(rule_data, dict):
                raise GrammarError(f"Verb #{index + 1} {words}: rules must be mappings with 'pattern' and 'action'.")
            action_name = rule_data.get('action')
            if action_name not in actions:
                raise GrammarError(f"Verb #{index + 1} {words}: unknown action '{action_name}'.")
            rules.append(Rule(rule_data.get('pattern', ''), actions[action_name], action_name))

        verbs.append(Verb(words, rules))

    return Grammar(verbs, registry)


def load_grammar(path, actions, world=None):
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    return grammar_from_dict(data, actions, world)
