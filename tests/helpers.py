from lore_parser.grammar import Grammar, Rule, Verb
from lore_parser.resolvers import EntityResolver, PhraseResolver, ResolverRegistry
from lore_parser.world import World

ROOM_OBJECTS = ['old rusty key', 'old man', 'desk', 'big crate', 'small crate']


def make_world(*names):
    return World({'scenes': [{'id': 'room', 'objects': list(names or ROOM_OBJECTS)}]})


def make_registry(world):
    return ResolverRegistry({
        'single': EntityResolver(world),
        'dance_style': PhraseResolver(['waltz', 'tango', 'funky chicken']),
    })


class Recorder:
    """Action stand-in that remembers every call."""

    def __init__(self, label):
        self.label = label
        self.calls = []

    def __call__(self, *params):
        self.calls.append(params)
        return (self.label,) + params


def make_grammar(world, **actions):
    def act(name):
        if name not in actions:
            actions[name] = Recorder(name)
        return actions[name]

    verbs = [
        Verb(['give'], [
            Rule('single single', act('give'), 'give'),
            Rule('single "to" single', act('give_reversed'), 'give_reversed'),
        ]),
        Verb(['pick'], [
            Rule('"up" single', act('take'), 'take'),
            Rule('"up" single "on" single', act('take_from'), 'take_from'),
        ]),
        Verb(['dance'], [
            Rule('', act('dance'), 'dance'),
            Rule('dance_style', act('dance_with_style'), 'dance_with_style'),
        ]),
        Verb(['put', 'place'], [
            Rule('single "on" single', act('put'), 'put'),
        ]),
        Verb(['gain'], [
            Rule('"possession of" single', act('take'), 'take'),
        ]),
    ]
    return Grammar(verbs, make_registry(world)), actions
