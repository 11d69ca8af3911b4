class _Exhausted:
    def __repr__(self):
        return 'EXHAUSTED'

    def __bool__(self):
        return False


# Returned by a cursor that has run off the end of its sequence
EXHAUSTED = _Exhausted()


class TokenCursor:
    """
    A forward-only position over a sequence of rule tokens or input words.
    The position starts before the first element, so the first advance()
    lands on element 0.
    """

    def __init__(self, items, position=-1):
        self.items = tuple(items)
        self.position = position

    def advance(self):
        self.position += 1
        return self.current()

    def current(self):
        if 0 <= self.position < len(self.items):
            return self.items[self.position]
        return EXHAUSTED

    def peek(self):
        token = self.advance()
        self.position -= 1
        return token

    def fork(self, position=None):
        """Independent cursor over the same sequence."""
        if position is None:
            position = self.position
        return TokenCursor(self.items, position)

    def remaining(self):
        return list(self.items[max(self.position, 0):])

    def __repr__(self):
        return f"TokenCursor(position={self.position}, items={list(self.items)!r})"
