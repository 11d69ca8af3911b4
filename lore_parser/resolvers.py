from lore_parser.cursor import EXHAUSTED
from lore_parser.errors import GrammarError
from lore_parser.outcome import (
    AMBIGUOUS_REFERENCE,
    NO_MATCHING_REFERENCE,
    UNKNOWN_PHRASE,
    Failed,
    Resolved,
)


class Resolver:
    """
    Base class for symbol resolvers.
    resolve() gets the input cursor positioned on the first word it may
    consume and returns Resolved(value, new_position) or Failed(reason).
    """

    def resolve(self, cursor):
        raise NotImplementedError


# ==========================================================
# 1. THE ENTITY DISAMBIGUATOR
# ==========================================================
class EntityResolver(Resolver):
    """
    Picks the entity in scope whose name covers the longest run of input
    words. 'old rusty' finds the old rusty key, 'old' alone is ambiguous
    when the old man is in the room too.
    """

    def __init__(self, world):
        self.world = world

    def resolve(self, cursor):
        start = cursor.position
        best_matches = []  # [(entity, end_position)]
        best_score = 0

        for entity in self.world.entities_in_scope():
            cursor.position = start
            score = self.score(entity, cursor)
            if score <= 0:
                continue
            if score == best_score:
                best_matches.append((entity, cursor.position))
            elif score > best_score:
                best_matches = [(entity, cursor.position)]
                best_score = score

        cursor.position = start
        if not best_matches:
            return Failed(NO_MATCHING_REFERENCE, {"words": cursor.remaining()})
        if len(best_matches) > 1:
            return Failed(AMBIGUOUS_REFERENCE, {
                "candidates": [" ".join(entity.words) for entity, _ in best_matches],
                "score": best_score,
            })

        entity, end_position = best_matches[0]
        cursor.position = end_position
        return Resolved(entity, end_position)

    def score(self, entity, cursor):
        """Counts consecutive input words found in the entity's name and
        leaves the cursor just past them."""
        parse_name = getattr(entity, 'parse_name', None)
        if parse_name is not None:
            claimed = parse_name(cursor.items, cursor.position)
            # -1 means the entity declines and the default scoring applies
            if claimed != -1:
                claimed = max(0, min(claimed, len(cursor.items) - cursor.position))
                cursor.position += claimed
                return claimed

        # Membership, not word order: 'key rusty' scores 2 for the old rusty key
        names = set(entity.words)
        score = 0
        while cursor.current() is not EXHAUSTED and cursor.current() in names:
            score += 1
            cursor.advance()
        return score


# ==========================================================
# 2. FIXED PHRASES
# ==========================================================
class PhraseResolver(Resolver):
    """Matches one of a fixed list of phrases word for word, e.g. dance styles."""

    def __init__(self, phrases):
        for phrase in phrases:
            if not isinstance(phrase, str):
                raise GrammarError(f"Phrase {phrase!r} must be text (quote it in YAML).")
        self.phrases = [" ".join(phrase.lower().split()) for phrase in phrases]

    def resolve(self, cursor):
        start = cursor.position
        for phrase in self.phrases:
            cursor.position = start
            expected = phrase.split()
            taken = []
            for _ in expected:
                word = cursor.current()
                if word is EXHAUSTED:
                    break
                taken.append(word)
                cursor.advance()
            if taken == expected:
                return Resolved(phrase, cursor.position)

        cursor.position = start
        return Failed(UNKNOWN_PHRASE, {"words": cursor.remaining(), "known": list(self.phrases)})


# ==========================================================
# 3. THE REGISTRY
# ==========================================================
class ResolverRegistry:
    """Symbol name -> resolver. Filled once while the grammar is built."""

    def __init__(self, resolvers=None):
        self._resolvers = {}
        for name, resolver in (resolvers or {}).items():
            self.register(name, resolver)

    def register(self, name, resolver):
        if not callable(getattr(resolver, 'resolve', None)):
            raise GrammarError(f"Resolver for symbol '{name}' has no resolve() method.")
        self._resolvers[name] = resolver
        return resolver

    def get(self, name):
        return self._resolvers.get(name)

    def names(self):
        return list(self._resolvers)

    def __contains__(self, name):
        return name in self._resolvers


def build_resolvers(symbols, world=None):
    """
    Builds a registry from the 'symbols' block of a grammar document.

        single: entity
        dance_style:
          phrases: [waltz, tango, funky chicken]
    """
    registry = ResolverRegistry()
    for name, definition in (symbols or {}).items():
        if isinstance(definition, str):
            definition = {"type": definition}
        if not isinstance(definition, dict):
            raise GrammarError(f"Symbol '{name}' must be a resolver type or a mapping.")

        kind = definition.get('type', 'phrases' if 'phrases' in definition else None)
        if kind == 'entity':
            if world is None:
                raise GrammarError(f"Symbol '{name}' needs a world to resolve entities.")
            registry.register(name, EntityResolver(world))
        elif kind == 'phrases':
            phrases = definition.get('phrases') or []
            if isinstance(phrases, str):
                phrases = [phrases]
            if not isinstance(phrases, list):
                raise GrammarError(f"Symbol '{name}': phrases must be a list, got {phrases!r}.")
            if not phrases:
                raise GrammarError(f"Symbol '{name}' has no phrases.")
            registry.register(name, PhraseResolver(phrases))
        else:
            raise GrammarError(f"Symbol '{name}' has unknown resolver type: {kind!r}")
    return registry
