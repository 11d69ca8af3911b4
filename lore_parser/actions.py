# The demo actions bound by data/grammar.yaml.
# A real game would change its world here; these only describe the command.


def _name(obj):
    name = getattr(obj, 'name', None)
    return name.lower() if name else " ".join(obj.words)


def take(obj):
    return f"You take the {_name(obj)}."


def take_from(obj, container):
    return f"You take the {_name(obj)} from the {_name(container)}."


def give(recipient, obj):
    return f"You give the {_name(obj)} to the {_name(recipient)}."


def give_reversed(obj, recipient):
    return give(recipient, obj)


def dance():
    return "You flail around wildly. Everyone judges you."


def dance_with_style(style):
    return f"You dance the {style} very well."


def put(obj, surface):
    return f"You put the {_name(obj)} on the {_name(surface)}."


ACTIONS = {
    'take': take,
    'take_from': take_from,
    'give': give,
    'give_reversed': give_reversed,
    'dance': dance,
    'dance_with_style': dance_with_style,
    'put': put,
}
