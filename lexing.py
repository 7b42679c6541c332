"""
letprint lexer
Token rules are declared with pyparsing; the scanner turns source text into
an EOF-terminated list of tokens or fails on the first unknown character
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from pyparsing import (
    Literal, MatchFirst, ParseException, ParserElement, StringEnd,
    Word, ZeroOrMore, alphanums, alphas, nums
)

from error_handling import UnexpectedCharacter


# space, tab, carriage return, newline
WHITESPACE = " \t\r\n"


class TokenKind(Enum):
    LET = "let"
    IDENTIFIER = "identifier"
    EQ = "="
    NUMBER = "number"
    PRINT = "print"
    LPAREN = "("
    RPAREN = ")"
    SEMICOL = ";"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A classified lexical unit; text is the exact substring matched"""
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"


KEYWORDS = {
    'let': TokenKind.LET,
    'print': TokenKind.PRINT,
}

PUNCTUATION = {
    '=': TokenKind.EQ,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ';': TokenKind.SEMICOL,
}

EOF_TOKEN = Token(TokenKind.EOF, "")


def lookup_identifier(text: str) -> TokenKind:
    """Classify an identifier-shaped run as a keyword or a plain identifier"""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)


def _word_token(tokens) -> Token:
    text = tokens[0]
    return Token(lookup_identifier(text), text)


def _number_token(tokens) -> Token:
    return Token(TokenKind.NUMBER, tokens[0])


def _punctuation_rule(text: str, kind: TokenKind) -> ParserElement:
    rule = Literal(text).set_whitespace_chars(WHITESPACE, copy_defaults=False)
    return rule.set_parse_action(lambda t: Token(kind, t[0]))


class Tokenizer:
    """Scanner built from pyparsing token rules"""

    def __init__(self, debug: bool = False):
        self.debug = debug
        self._setup_token_patterns()

    def _setup_token_patterns(self):
        # Word is greedy, which gives maximal munch for identifiers and numbers
        word = Word(alphas + "_", alphanums + "_")
        word.set_whitespace_chars(WHITESPACE, copy_defaults=False)
        word.set_parse_action(_word_token)

        number = Word(nums)
        number.set_whitespace_chars(WHITESPACE, copy_defaults=False)
        number.set_parse_action(_number_token)

        punctuation = MatchFirst(
            [_punctuation_rule(text, kind) for text, kind in PUNCTUATION.items()]
        )

        end = StringEnd().set_whitespace_chars(WHITESPACE, copy_defaults=False)

        self.token = word | number | punctuation
        self.token_stream = ZeroOrMore(self.token) + end
        # offsets in ParseException must index the original text
        self.token_stream.parse_with_tabs()

    def tokenize(self, source: str) -> List[Token]:
        """Scan source left to right; the result always ends with one EOF token"""
        try:
            result = self.token_stream.parse_string(source)
        except ParseException as e:
            raise UnexpectedCharacter(source[e.loc:e.loc + 1]) from None

        tokens = list(result)
        tokens.append(EOF_TOKEN)

        if self.debug:
            print(f"Tokenized {len(tokens)} tokens", file=sys.stderr)
            for token in tokens:
                print(f"  {token}", file=sys.stderr)

        return tokens


def tokenize(source: str, debug: bool = False) -> List[Token]:
    """Convert source text into an EOF-terminated token list"""
    return Tokenizer(debug).tokenize(source)


def format_tokens(tokens: Sequence[Token]) -> str:
    """One token per line, numbered, for debugging output"""
    return "\n".join(f"{i:4d}: {token}" for i, token in enumerate(tokens, 1))
