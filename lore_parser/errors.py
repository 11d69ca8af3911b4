class GrammarError(ValueError):
    """A grammar, resolver table or world document that cannot be used."""
