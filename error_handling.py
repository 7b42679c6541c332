"""
Error taxonomy for the letprint pipeline
Every error is fatal: the first one aborts the run
"""

from typing import Any, Dict, Optional


# ============================================================================
# EXIT CODES
# ============================================================================

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_LEX_ERROR = 2
EXIT_PARSE_ERROR = 3
EXIT_EVAL_ERROR = 4


# ============================================================================
# DATA STRUCTURES (Plain Dictionaries)
# ============================================================================

def make_error_info(kind: str, message: str, **context: Any) -> Dict:
    """Create an error description: kind, message and diagnostic context"""
    return {
        'kind': kind,
        'message': message,
        'context': dict(context)
    }


def format_error(error: Any) -> str:
    """Format an error dict or a LetprintError as a single line"""
    if isinstance(error, LetprintError):
        error = error.info()
    return f"{error['kind']}: {error['message']}"


def describe_token(token: Any) -> str:
    """Short description of a token for messages: kind plus text when useful"""
    kind = token.kind.name
    if token.text and token.text != kind.lower():
        return f"{kind} '{token.text}'"
    return kind


# ============================================================================
# EXCEPTION CLASSES
# ============================================================================

class LetprintError(Exception):
    """Base class for every pipeline error"""
    exit_code = EXIT_INPUT_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def context(self) -> Dict:
        return {}

    def info(self) -> Dict:
        return make_error_info(self.kind, self.message, **self.context())

    def __str__(self) -> str:
        return format_error(self)


class LexError(LetprintError):
    """Raised by the lexer"""
    exit_code = EXIT_LEX_ERROR


class ParseError(LetprintError):
    """Raised by the parser"""
    exit_code = EXIT_PARSE_ERROR


class EvaluationError(LetprintError):
    """Raised by the evaluator"""
    exit_code = EXIT_EVAL_ERROR


class UnexpectedCharacter(LexError):
    """A character matches no token rule"""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"unexpected character {character!r}")

    def context(self) -> Dict:
        return {'character': self.character}


class UnexpectedToken(ParseError):
    """The current token's kind differs from the one the grammar requires"""

    def __init__(self, expected: Any, found: Any):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected.name}, found {describe_token(found)}")

    def context(self) -> Dict:
        return {'expected': self.expected, 'found': self.found}


class InvalidPrintArgument(ParseError):
    """print( followed by something that is neither an identifier nor a number"""

    def __init__(self, found: Any):
        self.found = found
        super().__init__(
            f"expected IDENTIFIER or NUMBER in print statement, found {describe_token(found)}"
        )

    def context(self) -> Dict:
        return {'found': self.found}


class UnexpectedStatement(ParseError):
    """A statement starts with something other than let or print"""

    def __init__(self, found: Any):
        self.found = found
        super().__init__(f"expected LET or PRINT at start of statement, found {describe_token(found)}")

    def context(self) -> Dict:
        return {'found': self.found}


class InvalidNumber(ParseError):
    """Number text that does not fit the integer representation"""

    def __init__(self, text: str, reason: Optional[str] = None):
        self.text = text
        message = f"invalid number {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

    def context(self) -> Dict:
        return {'text': self.text}


class UndefinedVariable(EvaluationError):
    """print of an identifier that no earlier let declared"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{identifier} is not defined")

    def context(self) -> Dict:
        return {'identifier': self.identifier}
