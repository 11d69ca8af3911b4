import unittest

from lore_parser.lexer import Literal, Symbol, compile_rule, describe_tokens, normalize


class TestNormalize(unittest.TestCase):
    def test_lowercases_and_splits(self):
        self.assertEqual(normalize("Pick UP key"), ['pick', 'up', 'key'])

    def test_removes_articles_anywhere(self):
        self.assertEqual(normalize("the give a key to an old man"), ['give', 'key', 'to', 'old', 'man'])
        self.assertEqual(normalize("dance the"), ['dance'])

    def test_articles_inside_words_are_kept(self):
        self.assertEqual(normalize("take theater ant"), ['take', 'theater', 'ant'])

    def test_collapses_whitespace(self):
        self.assertEqual(normalize("  put\tsmall   crate \n on big crate  "),
                         ['put', 'small', 'crate', 'on', 'big', 'crate'])

    def test_empty_input(self):
        self.assertEqual(normalize(""), [])
        self.assertEqual(normalize("   "), [])
        self.assertEqual(normalize("the a an"), [])

    def test_idempotent(self):
        samples = ["", "Dance", "  give THE old man   a key ", "a", "pick up an old rusty key on the desk"]
        for text in samples:
            once = normalize(text)
            self.assertEqual(normalize(once), once)
            self.assertEqual(normalize(" ".join(once)), once)

    def test_custom_articles(self):
        self.assertEqual(normalize("take some key", articles=['some']), ['take', 'key'])
        self.assertEqual(normalize("take the key", articles=[]), ['take', 'the', 'key'])


class TestCompileRule(unittest.TestCase):
    def test_blank_rule(self):
        self.assertEqual(compile_rule(''), ())
        self.assertEqual(compile_rule('   '), ())

    def test_literals_and_symbols(self):
        self.assertEqual(
            compile_rule('"up" single "on" single'),
            (Literal('up'), Symbol('single'), Literal('on'), Symbol('single')),
        )
        self.assertEqual(
            compile_rule('single "on" single'),
            (Symbol('single'), Literal('on'), Symbol('single')),
        )

    def test_quoted_span_splits_into_words(self):
        self.assertEqual(compile_rule('"possession of" single'),
                         (Literal('possession'), Literal('of'), Symbol('single')))

    def test_quoted_words_are_lowercased_letters(self):
        self.assertEqual(compile_rule('"Look, AT"'), (Literal('look'), Literal('at')))

    def test_symbol_names_are_verbatim(self):
        self.assertEqual(compile_rule('dance_style'), (Symbol('dance_style'),))
        self.assertEqual(compile_rule('Single'), (Symbol('Single'),))

    def test_tokens_are_immutable(self):
        token = Literal('up')
        with self.assertRaises(AttributeError):
            token.value = 'down'

    def test_describe_tokens(self):
        self.assertEqual(describe_tokens(compile_rule('"up" single')), '"up" single')
        self.assertEqual(describe_tokens(()), '[blank]')


if __name__ == '__main__':
    unittest.main()
