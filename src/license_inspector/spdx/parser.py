"""Tokenizer and recursive-descent parser for SPDX license expressions.

Grammar, tightest binding first::

    expression   = or-expr
    or-expr      = and-expr *( "OR" and-expr )
    and-expr     = with-expr *( "AND" with-expr )
    with-expr    = simple [ "WITH" exception-id ]
    simple       = idstring [ "+" ] / license-ref / "(" or-expr ")"
    license-ref  = [ "DocumentRef-" idstring ":" ] "LicenseRef-" idstring
    idstring     = 1*( ALPHA / DIGIT / "-" / "." )

Operators are accepted in all-upper or all-lower case. A chain of one
operator at one nesting level becomes a single compound expression with all
operands in order.
"""

import logging
import re
from enum import Enum
from typing import NamedTuple, Optional

from license_inspector.exceptions import SpdxException, SpdxSyntaxError
from license_inspector.models import Issue, Severity
from license_inspector.spdx.expression import (
    SpdxCompoundExpression,
    SpdxExpression,
    SpdxOperator,
    SpdxSingleLicense,
    Strictness,
)

logger = logging.getLogger(__name__)


class TokenType(str, Enum):
    IDSTRING = "IDSTRING"
    LICENSE_REF = "LICENSE_REF"
    DOCUMENT_REF = "DOCUMENT_REF"
    PLUS = "PLUS"
    AND = "AND"
    OR = "OR"
    WITH = "WITH"
    OPEN = "OPEN"
    CLOSE = "CLOSE"


class Token(NamedTuple):
    type: TokenType
    text: str
    position: int


_IDSTRING = r"[A-Za-z0-9.\-]+"

TOKEN_PATTERN = re.compile(
    rf"(?P<ws>\s+)"
    rf"|(?P<{TokenType.DOCUMENT_REF.value}>DocumentRef-{_IDSTRING}:LicenseRef-{_IDSTRING})"
    rf"|(?P<{TokenType.LICENSE_REF.value}>LicenseRef-{_IDSTRING})"
    rf"|(?P<{TokenType.IDSTRING.value}>{_IDSTRING})"
    rf"|(?P<{TokenType.PLUS.value}>\+)"
    rf"|(?P<{TokenType.OPEN.value}>\()"
    rf"|(?P<{TokenType.CLOSE.value}>\))"
)

KEYWORDS = {
    "AND": TokenType.AND,
    "and": TokenType.AND,
    "OR": TokenType.OR,
    "or": TokenType.OR,
    "WITH": TokenType.WITH,
    "with": TokenType.WITH,
}


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens.

    Args:
        expression: The expression text.

    Returns:
        The tokens in order, white space removed.

    Raises:
        SpdxSyntaxError: If the text contains a character that cannot start
            any token.
    """
    tokens: list[Token] = []
    position = 0

    while position < len(expression):
        match = TOKEN_PATTERN.match(expression, position)
        if match is None:
            fragment = expression[position:].split(None, 1)[0]
            raise SpdxSyntaxError(
                f"Unexpected character '{expression[position]}' at position {position} "
                f"in '{expression}' near '{fragment}'.",
                expression=expression,
                fragment=fragment,
                position=position,
            )

        kind = match.lastgroup
        text = match.group()
        if kind != "ws":
            token_type = TokenType(kind)
            if token_type is TokenType.IDSTRING:
                token_type = KEYWORDS.get(text, token_type)
            tokens.append(Token(token_type, text, position))

        position = match.end()

    return tokens


class _Parser:
    """Single-use parser over the tokens of one expression."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.tokens = tokenize(expression)
        self.index = 0

    def _peek(self) -> Optional[Token]:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise self._error("Unexpected end of expression", fragment=self.expression.strip())
        self.index += 1
        return token

    def _error(
        self, message: str, fragment: str, position: Optional[int] = None
    ) -> SpdxSyntaxError:
        where = f" at position {position}" if position is not None else ""
        return SpdxSyntaxError(
            f"{message}{where} in '{self.expression}': '{fragment}'.",
            expression=self.expression,
            fragment=fragment,
            position=position,
        )

    def _unexpected(self, token: Token) -> SpdxSyntaxError:
        return self._error(
            f"Unexpected token {token.type.value}", fragment=token.text, position=token.position
        )

    def parse(self) -> SpdxExpression:
        if not self.tokens:
            raise self._error("Empty license expression", fragment=self.expression)

        result = self._or_expression()

        token = self._peek()
        if token is not None:
            raise self._error(
                "Unexpected trailing input",
                fragment=self.expression[token.position :],
                position=token.position,
            )

        return result

    def _binary(self, operator: SpdxOperator, token_type: TokenType, operand) -> SpdxExpression:
        operands = [operand()]
        while True:
            token = self._peek()
            if token is None or token.type is not token_type:
                break
            self.index += 1
            operands.append(operand())

        if len(operands) == 1:
            return operands[0]
        return SpdxCompoundExpression(operator, tuple(operands))

    def _or_expression(self) -> SpdxExpression:
        return self._binary(SpdxOperator.OR, TokenType.OR, self._and_expression)

    def _and_expression(self) -> SpdxExpression:
        return self._binary(SpdxOperator.AND, TokenType.AND, self._with_expression)

    def _with_expression(self) -> SpdxExpression:
        simple = self._simple_expression()

        token = self._peek()
        if token is None or token.type is not TokenType.WITH:
            return simple

        self.index += 1
        if not isinstance(simple, SpdxSingleLicense) or simple.exception:
            raise self._error(
                "WITH must follow a single license", fragment=str(simple), position=token.position
            )

        exception = self._next()
        if exception.type is not TokenType.IDSTRING:
            raise self._unexpected(exception)

        return simple.with_exception(exception.text)

    def _simple_expression(self) -> SpdxExpression:
        token = self._next()

        if token.type is TokenType.OPEN:
            inner = self._or_expression()
            closing = self._peek()
            if closing is None:
                raise self._error(
                    "Missing closing parenthesis",
                    fragment=self.expression[token.position :],
                    position=token.position,
                )
            if closing.type is not TokenType.CLOSE:
                raise self._unexpected(closing)
            self.index += 1
            return inner

        if token.type in (TokenType.LICENSE_REF, TokenType.DOCUMENT_REF):
            return SpdxSingleLicense(token.text)

        if token.type is TokenType.IDSTRING:
            following = self._peek()
            if following is not None and following.type is TokenType.PLUS:
                self.index += 1
                return SpdxSingleLicense(token.text, or_later=True)
            return SpdxSingleLicense(token.text)

        raise self._unexpected(token)


def parse(expression: str, strictness: Strictness = Strictness.ALLOW_ANY) -> SpdxExpression:
    """Parse an SPDX license expression.

    Args:
        expression: The expression text, e.g. "MIT OR (Apache-2.0 AND BSD-3-Clause)".
        strictness: Validation level applied to the parsed ids.

    Returns:
        The expression tree.

    Raises:
        SpdxSyntaxError: If the text does not match the grammar.
        SpdxValidationError: If an id is not allowed by ``strictness``.
    """
    result = _Parser(expression).parse()
    if strictness is not Strictness.ALLOW_ANY:
        result.validate(strictness)
    return result


def parse_or_issue(
    expression: str,
    source: str = "SpdxExpression",
    strictness: Strictness = Strictness.ALLOW_ANY,
) -> tuple[Optional[SpdxExpression], Optional[Issue]]:
    """Parse an expression, reporting failures as an issue instead of raising.

    Args:
        expression: The expression text.
        source: Name recorded as the source of a resulting issue.
        strictness: Validation level applied to the parsed ids.

    Returns:
        Tuple of (expression, None) on success or (None, issue) on failure.
    """
    try:
        return parse(expression, strictness), None
    except SpdxException as e:
        logger.warning("Could not parse license expression '%s': %s", expression, e)
        return None, Issue(source=source, message=str(e), severity=Severity.ERROR)
