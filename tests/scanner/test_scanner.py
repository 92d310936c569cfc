"""Example-based tests for the scanner state machine."""

import pytest

from loxscan.diagnostics import CollectingSink, LexicalErrorKind
from loxscan.scanner import Scanner, scan
from loxscan.tokens import KEYWORDS, Token, TokenKind


def kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in scan(source)]


class TestPunctuation:
    """Single-character punctuation."""

    @pytest.mark.parametrize(
        "char,kind",
        [
            ("(", TokenKind.LEFT_PAREN),
            (")", TokenKind.RIGHT_PAREN),
            ("{", TokenKind.LEFT_BRACE),
            ("}", TokenKind.RIGHT_BRACE),
            (",", TokenKind.COMMA),
            (".", TokenKind.DOT),
            ("-", TokenKind.MINUS),
            ("+", TokenKind.PLUS),
            (";", TokenKind.SEMICOLON),
            ("*", TokenKind.STAR),
            ("/", TokenKind.SLASH),
        ],
    )
    def test_single_char(self, char: str, kind: TokenKind) -> None:
        tokens = scan(char)
        assert tokens[0] == Token(kind, char, None, 1)
        assert tokens[1].kind == TokenKind.END_OF_INPUT

    def test_adjacent_punctuation(self) -> None:
        assert kinds("(){};") == [
            TokenKind.LEFT_PAREN,
            TokenKind.RIGHT_PAREN,
            TokenKind.LEFT_BRACE,
            TokenKind.RIGHT_BRACE,
            TokenKind.SEMICOLON,
            TokenKind.END_OF_INPUT,
        ]


class TestOperators:
    """One and two character operators (maximal munch)."""

    @pytest.mark.parametrize(
        "source,kind",
        [
            ("!", TokenKind.BANG),
            ("!=", TokenKind.BANG_EQUAL),
            ("=", TokenKind.EQUAL),
            ("==", TokenKind.EQUAL_EQUAL),
            ("<", TokenKind.LESS),
            ("<=", TokenKind.LESS_EQUAL),
            (">", TokenKind.GREATER),
            (">=", TokenKind.GREATER_EQUAL),
        ],
    )
    def test_operator(self, source: str, kind: TokenKind) -> None:
        tokens = scan(source)
        assert len(tokens) == 2
        assert tokens[0].kind == kind
        assert tokens[0].lexeme == source

    def test_less_equal_is_one_token(self) -> None:
        """'<=' is never LESS followed by EQUAL."""
        assert kinds("<=") == [TokenKind.LESS_EQUAL, TokenKind.END_OF_INPUT]

    def test_three_equals(self) -> None:
        assert kinds("===") == [
            TokenKind.EQUAL_EQUAL,
            TokenKind.EQUAL,
            TokenKind.END_OF_INPUT,
        ]

    def test_space_breaks_operator(self) -> None:
        assert kinds("< =") == [TokenKind.LESS, TokenKind.EQUAL, TokenKind.END_OF_INPUT]

    def test_operator_at_end_of_input(self) -> None:
        assert kinds("a !") == [
            TokenKind.IDENTIFIER,
            TokenKind.BANG,
            TokenKind.END_OF_INPUT,
        ]


class TestComments:
    """Line comments and division."""

    def test_comment_then_number(self) -> None:
        """The comment contributes nothing; its newline counts once."""
        tokens = scan("// comment\n123")

        assert len(tokens) == 2
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].literal == 123.0
        assert tokens[0].line == 2
        assert tokens[1].line == 2

    def test_comment_at_end_of_input(self) -> None:
        tokens = scan("1 // trailing")
        assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.END_OF_INPUT]
        assert tokens[-1].line == 1

    def test_comment_swallows_operators_and_quotes(self) -> None:
        sink = CollectingSink()
        tokens = scan('// "unterminated @ <=\n', sink)
        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]
        assert not sink.has_errors
        assert tokens[-1].line == 2

    def test_division_is_not_comment(self) -> None:
        assert kinds("a / b") == [
            TokenKind.IDENTIFIER,
            TokenKind.SLASH,
            TokenKind.IDENTIFIER,
            TokenKind.END_OF_INPUT,
        ]


class TestWhitespace:
    """Whitespace and line counting."""

    def test_empty_source(self) -> None:
        tokens = scan("")
        assert tokens == [Token(TokenKind.END_OF_INPUT, "", None, 1)]

    def test_whitespace_only(self) -> None:
        tokens = scan(" \t\r ")
        assert tokens == [Token(TokenKind.END_OF_INPUT, "", None, 1)]

    def test_newlines_advance_line(self) -> None:
        tokens = scan("a\n\nb\r\nc")
        assert [(t.lexeme, t.line) for t in tokens] == [
            ("a", 1),
            ("b", 3),
            ("c", 4),
            ("", 4),
        ]


class TestStrings:
    """String literals."""

    def test_simple_string(self) -> None:
        tokens = scan('"hello"')
        assert tokens[0] == Token(TokenKind.STRING, '"hello"', "hello", 1)

    def test_empty_string(self) -> None:
        tokens = scan('""')
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].literal == ""

    def test_multiline_string(self) -> None:
        """Newlines inside a string count; the token keeps its start line."""
        tokens = scan('"one\ntwo\nthree" x')

        assert tokens[0].literal == "one\ntwo\nthree"
        assert tokens[0].line == 1
        assert tokens[1].lexeme == "x"
        assert tokens[1].line == 3

    def test_no_escape_processing(self) -> None:
        tokens = scan(r'"a\nb"')
        assert tokens[0].literal == r"a\nb"

    def test_backslash_does_not_escape_quote(self) -> None:
        tokens = scan('"a\\" b')
        assert tokens[0].literal == "a\\"
        assert tokens[1].kind == TokenKind.IDENTIFIER

    def test_keywords_inside_string(self) -> None:
        assert kinds('"var if"') == [TokenKind.STRING, TokenKind.END_OF_INPUT]


class TestNumbers:
    """Number literals."""

    @pytest.mark.parametrize(
        "source,value",
        [
            ("0", 0.0),
            ("123", 123.0),
            ("007", 7.0),
            ("3.14", 3.14),
            ("10.50", 10.5),
        ],
    )
    def test_number_value(self, source: str, value: float) -> None:
        tokens = scan(source)
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].lexeme == source
        assert tokens[0].literal == value
        assert isinstance(tokens[0].literal, float)

    def test_trailing_dot_is_separate(self) -> None:
        """'1.' is NUMBER 1 followed by DOT."""
        tokens = scan("1.")
        assert tokens[0] == Token(TokenKind.NUMBER, "1", 1.0, 1)
        assert tokens[1] == Token(TokenKind.DOT, ".", None, 1)
        assert tokens[2].kind == TokenKind.END_OF_INPUT

    def test_method_call_on_number(self) -> None:
        assert kinds("1.abs") == [
            TokenKind.NUMBER,
            TokenKind.DOT,
            TokenKind.IDENTIFIER,
            TokenKind.END_OF_INPUT,
        ]

    def test_leading_dot_is_separate(self) -> None:
        tokens = scan(".5")
        assert [t.kind for t in tokens] == [
            TokenKind.DOT,
            TokenKind.NUMBER,
            TokenKind.END_OF_INPUT,
        ]
        assert tokens[1].literal == 5.0

    def test_second_dot_ends_number(self) -> None:
        tokens = scan("1.2.3")
        assert [t.lexeme for t in tokens] == ["1.2", ".", "3", ""]

    def test_negative_is_minus_then_number(self) -> None:
        assert kinds("-1") == [
            TokenKind.MINUS,
            TokenKind.NUMBER,
            TokenKind.END_OF_INPUT,
        ]


class TestIdentifiers:
    """Identifiers and reserved words."""

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keyword(self, word: str) -> None:
        tokens = scan(word)
        assert tokens[0].kind == KEYWORDS[word]
        assert tokens[0].lexeme == word
        assert tokens[0].literal is None

    @pytest.mark.parametrize("word", ["x", "_", "_private", "camelCase", "a1_b2"])
    def test_identifier(self, word: str) -> None:
        tokens = scan(word)
        assert tokens[0] == Token(TokenKind.IDENTIFIER, word, None, 1)

    @pytest.mark.parametrize("word", ["variable", "orchid", "classy", "iffy", "nil_"])
    def test_keyword_prefix_is_identifier(self, word: str) -> None:
        """Maximal run is classified as a whole."""
        assert kinds(word) == [TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT]

    def test_keywords_are_case_sensitive(self) -> None:
        assert kinds("Var") == [TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT]

    def test_digit_then_letters(self) -> None:
        assert kinds("9lives") == [
            TokenKind.NUMBER,
            TokenKind.IDENTIFIER,
            TokenKind.END_OF_INPUT,
        ]

    def test_non_ascii_letter_is_unexpected(self) -> None:
        sink = CollectingSink()
        tokens = scan("é", sink)
        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]
        assert len(sink) == 1


class TestStatements:
    """Whole statements."""

    def test_var_declaration(self) -> None:
        tokens = scan('var x = "hi";')
        assert tokens == [
            Token(TokenKind.VAR, "var", None, 1),
            Token(TokenKind.IDENTIFIER, "x", None, 1),
            Token(TokenKind.EQUAL, "=", None, 1),
            Token(TokenKind.STRING, '"hi"', "hi", 1),
            Token(TokenKind.SEMICOLON, ";", None, 1),
            Token(TokenKind.END_OF_INPUT, "", None, 1),
        ]

    def test_function_declaration(self) -> None:
        source = "fun add(a, b) {\n  return a + b;\n}\n"
        tokens = scan(source)
        assert [t.lexeme for t in tokens] == [
            "fun", "add", "(", "a", ",", "b", ")", "{",
            "return", "a", "+", "b", ";",
            "}", "",
        ]  # fmt: skip
        assert tokens[8].line == 2
        assert tokens[13].line == 3
        assert tokens[-1].line == 4


class TestErrors:
    """Lexical errors are reported and skipped."""

    def test_unexpected_character(self) -> None:
        sink = CollectingSink()
        tokens = scan("@", sink)

        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]
        assert len(sink) == 1
        assert sink.diagnostics[0].kind == LexicalErrorKind.UNEXPECTED_CHARACTER
        assert sink.diagnostics[0].line == 1

    def test_unexpected_character_line(self) -> None:
        sink = CollectingSink()
        scan("a\nb\n#", sink)
        assert sink.diagnostics[0].line == 3

    def test_scan_continues_after_error(self) -> None:
        sink = CollectingSink()
        tokens = scan("a @ b # c", sink)

        assert [t.lexeme for t in tokens] == ["a", "b", "c", ""]
        assert len(sink) == 2

    def test_unterminated_string(self) -> None:
        sink = CollectingSink()
        tokens = scan('"unterminated', sink)

        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]
        assert len(sink) == 1
        assert sink.diagnostics[0].kind == LexicalErrorKind.UNTERMINATED_STRING
        assert tokens[-1].line == 1

    def test_unterminated_multiline_string(self) -> None:
        """Reported at the line where input ran out."""
        sink = CollectingSink()
        tokens = scan('x "one\ntwo\n', sink)

        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT]
        assert sink.diagnostics[0].line == 3
        assert tokens[-1].line == 3

    def test_lone_quote(self) -> None:
        sink = CollectingSink()
        tokens = scan('"', sink)
        assert [t.kind for t in tokens] == [TokenKind.END_OF_INPUT]
        assert sink.diagnostics[0].kind == LexicalErrorKind.UNTERMINATED_STRING

    def test_default_sink_collects(self) -> None:
        scanner = Scanner("@@")
        scanner.scan_tokens()
        assert isinstance(scanner.sink, CollectingSink)
        assert len(scanner.sink) == 2

    def test_any_object_with_report_is_a_sink(self) -> None:
        received: list[tuple[int, str]] = []

        class ListSink:
            def report(self, line: int, message: str) -> None:
                received.append((line, message))

        scan("\n$", ListSink())
        assert received == [(2, "Unexpected character.")]
