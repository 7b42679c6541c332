"""
letprint parser
LL(1) recursive descent over the token list produced by lexing.py
"""

import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union

from error_handling import (
    InvalidNumber, InvalidPrintArgument, UnexpectedStatement, UnexpectedToken
)
from lexing import EOF_TOKEN, Token, TokenKind, tokenize


# Numbers are signed 64-bit; the lexer never produces a sign
INT_MAX = 2 ** 63 - 1


# ============================================================================
# AST NODES
# ============================================================================

@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class NumberLiteral:
    value: int


Literal = Union[Identifier, NumberLiteral]


@dataclass(frozen=True)
class VariableDeclaration:
    """let <identifier> = <number>;"""
    identifier: str
    value: int


@dataclass(frozen=True)
class PrintStatement:
    """print(<identifier> | <number>);"""
    content: Literal


Statement = Union[VariableDeclaration, PrintStatement]


def parse_number(text: str) -> int:
    """Convert the text of a NUMBER token to an integer"""
    if not (text.isascii() and text.isdigit()):
        raise InvalidNumber(text)
    # compare lengths first; int() refuses very long digit strings
    digits = text.lstrip("0")
    if len(digits) > len(str(INT_MAX)):
        raise InvalidNumber(text, "larger than 64-bit integer")
    value = int(digits or "0")
    if value > INT_MAX:
        raise InvalidNumber(text, "larger than 64-bit integer")
    return value


# ============================================================================
# PARSER
# ============================================================================

class Parser:
    """Cursor based parser with a single token of lookahead"""

    def __init__(self, tokens: Sequence[Token], debug: bool = False):
        self.tokens = tokens
        self.position = 0
        self.debug = debug

    def current(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return EOF_TOKEN

    def advance(self) -> None:
        self.position += 1

    def expect(self, kind: TokenKind) -> Token:
        """Consume the current token if it has the given kind"""
        token = self.current()
        if token.kind != kind:
            raise UnexpectedToken(kind, token)
        self.advance()
        return token

    def parse(self) -> List[Statement]:
        """Parse statements until EOF"""
        statements = []
        while self.current().kind != TokenKind.EOF:
            statement = self.parse_statement()
            if self.debug:
                print(f"Parsed: {statement}", file=sys.stderr)
            statements.append(statement)
        return statements

    def parse_statement(self) -> Statement:
        kind = self.current().kind
        if kind == TokenKind.LET:
            return self.parse_variable_declaration()
        elif kind == TokenKind.PRINT:
            return self.parse_print_statement()
        raise UnexpectedStatement(self.current())

    def parse_variable_declaration(self) -> VariableDeclaration:
        self.expect(TokenKind.LET)
        identifier = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.EQ)
        number = self.expect(TokenKind.NUMBER)
        self.expect(TokenKind.SEMICOL)
        return VariableDeclaration(identifier.text, parse_number(number.text))

    def parse_print_statement(self) -> PrintStatement:
        self.expect(TokenKind.PRINT)
        self.expect(TokenKind.LPAREN)

        token = self.current()
        if token.kind == TokenKind.IDENTIFIER:
            content = Identifier(token.text)
        elif token.kind == TokenKind.NUMBER:
            content = NumberLiteral(parse_number(token.text))
        else:
            raise InvalidPrintArgument(token)
        self.advance()

        self.expect(TokenKind.RPAREN)
        self.expect(TokenKind.SEMICOL)
        return PrintStatement(content)


def parse(tokens: Sequence[Token], debug: bool = False) -> List[Statement]:
    """Parse a token list into a flat, source-ordered list of statements"""
    return Parser(tokens, debug).parse()


class SourceParser:
    """Combines the tokenizer and the parser"""

    def __init__(self, debug: bool = False):
        self.debug = debug

    def tokenize(self, text: str) -> List[Token]:
        return tokenize(text, self.debug)

    def parse_tokens(self, tokens: Sequence[Token]) -> List[Statement]:
        return parse(tokens, self.debug)

    def parse_string(self, text: str) -> List[Statement]:
        """Parse letprint source code from string"""
        return self.parse_tokens(self.tokenize(text))

    def parse_file(self, filepath: str) -> List[Statement]:
        with open(filepath, 'r', encoding='utf-8') as f:
            return self.parse_string(f.read())


# Factory functions for creating parsers
def create_parser(debug: bool = False) -> SourceParser:
    """Create a letprint parser"""
    return SourceParser(debug=debug)


def create_debug_parser() -> SourceParser:
    """Create a letprint parser with debug enabled"""
    return SourceParser(debug=True)


# ============================================================================
# AST UTILITIES
# ============================================================================

def ast_to_dict(node: Any) -> Dict[str, Any]:
    """Convert an AST node to a plain dictionary"""
    if isinstance(node, VariableDeclaration):
        return {'type': 'VariableDeclaration', 'identifier': node.identifier, 'value': node.value}
    if isinstance(node, PrintStatement):
        return {'type': 'PrintStatement', 'content': ast_to_dict(node.content)}
    if isinstance(node, Identifier):
        return {'type': 'IDENTIFIER', 'value': node.name}
    if isinstance(node, NumberLiteral):
        return {'type': 'NUMBER', 'value': node.value}
    raise TypeError(f"Not an AST node: {node!r}")


def pretty_print_ast(statements: Sequence[Statement]) -> str:
    """Pretty print statements for debugging"""
    lines = []
    for statement in statements:
        if isinstance(statement, VariableDeclaration):
            lines.append(f"VariableDeclaration({statement.identifier!r}, {statement.value})")
        else:
            content = statement.content
            if isinstance(content, Identifier):
                lines.append(f"PrintStatement(IDENTIFIER({content.name!r}))")
            else:
                lines.append(f"PrintStatement(NUMBER({content.value}))")
    return "\n".join(lines)
