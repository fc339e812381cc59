"""Test illegal-character handling, diagnostic positions, and context snippets."""

from monkeylex.errors import IllegalCharacterError
from monkeylex.lexer import check, scan, tokenize
from monkeylex.tokens import Position, TokenType, locate


class TestScannerNeverRaises:
    def test_illegal_then_continues(self):
        tokens = tokenize("let x = @5;")
        kinds = [t.kind for t in tokens]
        assert TokenType.ILLEGAL in kinds
        assert kinds[-2:] == [TokenType.SEMICOLON, TokenType.EOF]

    def test_only_garbage(self):
        tokens = tokenize("#$%^&|")
        assert [t.kind for t in tokens] == [TokenType.ILLEGAL] * 6 + [TokenType.EOF]

    def test_string_literal_is_not_supported(self):
        tokens = tokenize('"hi"')
        assert [t.text for t in tokens[:-1]] == ['"', "hi", '"']
        assert tokens[0].kind == TokenType.ILLEGAL

    def test_non_ascii_letter_is_one_illegal_token(self):
        tokens = tokenize("caf\u00e9")
        assert [(t.kind, t.text) for t in tokens] == [
            (TokenType.IDENT, "caf"),
            (TokenType.ILLEGAL, "\u00e9"),
            (TokenType.EOF, ""),
        ]


class TestLocate:
    def test_first_character(self):
        assert locate("abc", 0) == Position(1, 1, 0)

    def test_same_line(self):
        assert locate("abc", 2) == Position(1, 3, 2)

    def test_after_newline(self):
        assert locate("ab\ncd", 3) == Position(2, 1, 3)

    def test_end_of_input(self):
        assert locate("ab\n", 3) == Position(2, 1, 3)


class TestCheck:
    def test_clean_source(self):
        assert check("let x = 5;") == []

    def test_single_error_position(self):
        errors = check("abc @ rest")
        assert len(errors) == 1
        err = errors[0]
        assert err.position.line == 1
        assert err.position.column == 5
        assert err.position.offset == 4

    def test_error_on_second_line(self):
        errors = check("let x = 1;\n  ?")
        assert len(errors) == 1
        assert errors[0].position.line == 2
        assert errors[0].position.column == 3

    def test_errors_in_source_order(self):
        errors = check("@ # $")
        assert [e.position.column for e in errors] == [1, 3, 5]
        assert all(isinstance(e, IllegalCharacterError) for e in errors)

    def test_message_names_character(self):
        errors = check("@")
        assert errors[0].message == "illegal character '@'"


class TestScan:
    def test_tokens_match_tokenize(self):
        tokens, _ = scan("let x = @5;")
        assert tokens == tokenize("let x = @5;")

    def test_errors_located(self):
        _, errors = scan("a ? b\n: c")
        assert [(e.position.line, e.position.column) for e in errors] == [(1, 3), (2, 1)]

    def test_clean_source(self):
        tokens, errors = scan("fn(a) { a }")
        assert tokens[-1].kind == TokenType.EOF
        assert errors == []


class TestErrorFormatting:
    def test_format_contains_line(self):
        err = check("let y = 1 ~ 2;")[0]
        assert "let y = 1 ~ 2;" in err.format()

    def test_format_contains_caret_under_character(self):
        err = check("ab$")[0]
        last_line = err.format().splitlines()[-1]
        assert last_line.endswith("   ^")

    def test_format_contains_error_prefix(self):
        err = check("@")[0]
        assert err.format().startswith("error: illegal character")

    def test_format_contains_position(self):
        err = check("x\n\n@")[0]
        assert "3:1" in err.format()

    def test_format_with_custom_filename(self):
        err = check("@")[0]
        assert "--> prog.mk:1:1" in err.format("prog.mk")

    def test_str_is_formatted(self):
        err = check("@")[0]
        assert str(err) == err.format()

    def test_crlf_line_is_trimmed(self):
        err = check("ok\r\n@\r\n")[0]
        assert "2 | @\n" in err.format()
