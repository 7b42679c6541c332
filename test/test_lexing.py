"""
Lexer tests for letprint
"""

import pytest
from lexing import Token, TokenKind, Tokenizer, format_tokens, lookup_identifier, tokenize
from error_handling import UnexpectedCharacter, EXIT_LEX_ERROR


def kinds(tokens):
  return [token.kind for token in tokens]


class TestTokenize:
  """Token rules"""

  @pytest.fixture
  def tokenizer(self):
    return Tokenizer()

  def test_declaration(self, tokenizer):
    tokens = tokenizer.tokenize("let x = 69;")
    assert tokens == [
        Token(TokenKind.LET, "let"),
        Token(TokenKind.IDENTIFIER, "x"),
        Token(TokenKind.EQ, "="),
        Token(TokenKind.NUMBER, "69"),
        Token(TokenKind.SEMICOL, ";"),
        Token(TokenKind.EOF, ""),
    ]

  def test_print_statement(self, tokenizer):
    assert kinds(tokenizer.tokenize("print(x);")) == [
        TokenKind.PRINT, TokenKind.LPAREN, TokenKind.IDENTIFIER,
        TokenKind.RPAREN, TokenKind.SEMICOL, TokenKind.EOF,
    ]

  def test_no_whitespace_needed_around_punctuation(self, tokenizer):
    assert kinds(tokenizer.tokenize("let a=1;print(a);")) == [
        TokenKind.LET, TokenKind.IDENTIFIER, TokenKind.EQ, TokenKind.NUMBER, TokenKind.SEMICOL,
        TokenKind.PRINT, TokenKind.LPAREN, TokenKind.IDENTIFIER, TokenKind.RPAREN,
        TokenKind.SEMICOL, TokenKind.EOF,
    ]

  def test_all_whitespace_kinds_are_skipped(self, tokenizer):
    tokens = tokenizer.tokenize(" \t\r\nprint \t(\r\n7\n)\t;\n")
    assert [t.text for t in tokens] == ["print", "(", "7", ")", ";", ""]

  @pytest.mark.parametrize("source", ["", "   ", "\n\t\r\n  "])
  def test_empty_input_is_only_eof(self, tokenizer, source):
    assert tokenizer.tokenize(source) == [Token(TokenKind.EOF, "")]

  def test_sample_program(self, tokenizer, sample_program):
    tokens = tokenizer.tokenize(sample_program)
    assert len(tokens) == 2 * 5 + 3 * 5 + 1
    assert tokens[-1].kind == TokenKind.EOF


class TestMaximalMunch:
  """Identifier and number runs are captured in full before classification"""

  def test_keyword_prefix_is_identifier(self):
    assert tokenize("letter") == [Token(TokenKind.IDENTIFIER, "letter"), Token(TokenKind.EOF, "")]

  def test_keyword_with_digits_is_identifier(self):
    assert tokenize("print2")[0] == Token(TokenKind.IDENTIFIER, "print2")

  def test_underscores(self):
    assert tokenize("_tmp_1")[0] == Token(TokenKind.IDENTIFIER, "_tmp_1")
    assert tokenize("_")[0] == Token(TokenKind.IDENTIFIER, "_")

  def test_keywords_are_case_sensitive(self):
    assert tokenize("LET Print")[:2] == [
        Token(TokenKind.IDENTIFIER, "LET"),
        Token(TokenKind.IDENTIFIER, "Print"),
    ]

  def test_number_keeps_text(self):
    assert tokenize("007")[0] == Token(TokenKind.NUMBER, "007")

  def test_number_stops_at_letter(self):
    assert tokenize("12ab") == [
        Token(TokenKind.NUMBER, "12"),
        Token(TokenKind.IDENTIFIER, "ab"),
        Token(TokenKind.EOF, ""),
    ]

  def test_long_digit_run_is_one_token(self):
    digits = "9" * 40
    assert tokenize(digits)[0] == Token(TokenKind.NUMBER, digits)


class TestLexicalErrors:

  @pytest.mark.parametrize("source,character", [
      ("let x = 1 + 2;", "+"),
      ("print(-1);", "-"),
      ("$", "$"),
      ("let x = 1;\nprint(x)!", "!"),
      ("let café = 1;", "é"),
      ("print(1);\f", "\f"),
  ])
  def test_unexpected_character(self, source, character):
    with pytest.raises(UnexpectedCharacter) as exc_info:
      tokenize(source)
    assert exc_info.value.character == character

  def test_error_after_tab_reports_right_character(self):
    with pytest.raises(UnexpectedCharacter) as exc_info:
      tokenize("\tlet\tx\t=\t1;\t#")
    assert exc_info.value.character == "#"

  def test_error_message_and_exit_code(self):
    with pytest.raises(UnexpectedCharacter) as exc_info:
      tokenize("print(1)?")
    error = exc_info.value
    assert str(error) == "UnexpectedCharacter: unexpected character '?'"
    assert error.exit_code == EXIT_LEX_ERROR


class TestHelpers:

  def test_lookup_identifier(self):
    assert lookup_identifier("let") == TokenKind.LET
    assert lookup_identifier("print") == TokenKind.PRINT
    assert lookup_identifier("x") == TokenKind.IDENTIFIER

  def test_tokens_are_immutable(self):
    token = tokenize("x")[0]
    with pytest.raises(AttributeError):
      token.text = "y"

  def test_only_eof_has_empty_text(self, sample_program):
    tokens = tokenize(sample_program)
    assert [t for t in tokens if t.text == ""] == [tokens[-1]]

  def test_format_tokens(self):
    assert format_tokens(tokenize("print(1);")) == "\n".join([
        "   1: PRINT('print')",
        "   2: LPAREN('(')",
        "   3: NUMBER('1')",
        "   4: RPAREN(')')",
        "   5: SEMICOL(';')",
        "   6: EOF('')",
    ])
