# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Compiler from query text to the typed expression tree.

Supported syntax::

    name                          field access
    subject.science               nested field access
    [*].name                      wildcard projection
    [?subject.science > `80`].name
                                  filter, then projection of survivors
    [*].{Name: name, Result: subject.result}
                                  multi-key projection per element

Predicates join clauses with ``&&`` / ``||`` (or ``and`` / ``or``) and are
folded strictly left to right; parentheses group explicitly.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .exceptions import ExpressionSyntaxError
from .expressions import (
    Comparison,
    ComparisonOperator,
    Expression,
    FieldAccess,
    Filter,
    Identity,
    LogicalExpression,
    LogicalOperator,
    MultiProjection,
    Predicate,
    Subexpression,
    Wildcard,
)

_TOKEN_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("WHITESPACE", r"\s+"),
    ("WILDCARD", r"\[\s*\*\s*\]"),
    ("FILTER", r"\[\?"),
    ("RBRACKET", r"\]"),
    ("LBRACE", r"\{"),
    ("RBRACE", r"\}"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("COLON", r":"),
    ("COMMA", r","),
    ("AND", r"&&"),
    ("OR", r"\|\|"),
    ("COMPARATOR", r"==|!=|>=|<=|>|<"),
    ("NUMBER", r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?"),
    ("DOT", r"\."),
    ("IDENT", r"[A-Za-z_][A-Za-z0-9_]*"),
    ("QUOTED_IDENT", r'"(?:\\.|[^"\\])*"'),
    ("JSON_LITERAL", r"`(?:\\.|[^`\\])*`"),
    ("RAW_STRING", r"'(?:\\.|[^'\\])*'"),
)

_TOKEN_REGEX = re.compile(
    "|".join(f"(?P<{kind}>{pattern})" for kind, pattern in _TOKEN_PATTERNS)
)

_NAME_KINDS = {"IDENT", "QUOTED_IDENT"}
_LITERAL_KINDS = {"NUMBER", "JSON_LITERAL", "RAW_STRING"}
_KEYWORD_CONNECTIVES = {"and": LogicalOperator.AND, "or": LogicalOperator.OR}


@dataclass(frozen=True)
class Token:
    """Lexical token with its offset in the source text."""

    kind: str
    text: str
    position: int


class ExpressionParser:
    """Recursive-descent parser producing an Expression tree.

    One parser instance compiles exactly one expression.
    """

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._tokens = self._tokenize(expression)
        self._index = 0

    def parse(self) -> Expression:
        """Compile the whole expression.

        Returns:
            Root node of the expression tree.

        Raises:
            ExpressionSyntaxError: If the text is not a valid expression.
        """
        if not self._tokens:
            raise self._error(0, "expression is empty")
        node = self._parse_expression()
        if self._peek() is not None:
            token = self._peek()
            raise self._error(token.position, f"unexpected {token.text!r}")
        return node

    def _tokenize(self, expression: str) -> List[Token]:
        tokens = []
        position = 0
        while position < len(expression):
            match = _TOKEN_REGEX.match(expression, position)
            if match is None:
                raise self._error(
                    position, f"unexpected character {expression[position]!r}"
                )
            if match.lastgroup != "WHITESPACE":
                tokens.append(Token(match.lastgroup, match.group(), position))
            position = match.end()
        return tokens

    def _peek(self) -> Optional[Token]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _peek_kind(self) -> Optional[str]:
        token = self._peek()
        return token.kind if token is not None else None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            raise self._error(len(self._expression), "unexpected end of expression")
        self._index += 1
        return token

    def _expect(self, kind: str, description: str) -> Token:
        token = self._peek()
        if token is None or token.kind != kind:
            raise self._unexpected(description)
        self._index += 1
        return token

    def _error(self, position: int, reason: str) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(self._expression, position, reason)

    def _unexpected(self, description: str) -> ExpressionSyntaxError:
        token = self._peek()
        if token is None:
            return self._error(
                len(self._expression), f"expected {description}, got end of expression"
            )
        return self._error(
            token.position, f"expected {description}, got {token.text!r}"
        )

    def _parse_expression(self) -> Expression:
        kind = self._peek_kind()
        if kind in ("WILDCARD", "FILTER"):
            term: Expression = Identity()
        elif kind in _NAME_KINDS:
            term = self._parse_path_term()
        elif kind == "LBRACE":
            term = self._parse_multi_projection()
        else:
            raise self._unexpected("field name, '[*]', '[?' or '{'")

        if self._peek_kind() in ("WILDCARD", "FILTER"):
            return self._parse_projection(term)
        return term

    def _parse_path_term(self) -> Expression:
        names = [self._parse_name()]
        while self._peek_kind() == "DOT":
            self._advance()
            if self._peek_kind() == "LBRACE":
                return Subexpression(
                    FieldAccess(tuple(names)), self._parse_multi_projection()
                )
            names.append(self._parse_name())
        return FieldAccess(tuple(names))

    def _parse_field_path(self) -> FieldAccess:
        names = [self._parse_name()]
        while self._peek_kind() == "DOT":
            self._advance()
            names.append(self._parse_name())
        return FieldAccess(tuple(names))

    def _parse_name(self) -> str:
        token = self._peek()
        if token is None or token.kind not in _NAME_KINDS:
            raise self._unexpected("field name")
        self._advance()
        if token.kind == "QUOTED_IDENT":
            return json.loads(token.text)
        return token.text

    def _parse_projection(self, source: Expression) -> Expression:
        token = self._advance()
        if token.kind == "WILDCARD":
            return Wildcard(source, self._parse_projection_rest())

        predicate = self._parse_predicate()
        self._expect("RBRACKET", "']' to close filter")
        return Filter(source, predicate, self._parse_projection_rest())

    def _parse_projection_rest(self) -> Expression:
        kind = self._peek_kind()
        if kind == "DOT":
            self._advance()
            if self._peek_kind() not in _NAME_KINDS | {"LBRACE"}:
                raise self._unexpected("field name or '{' after '.'")
            return self._parse_expression()
        if kind in ("WILDCARD", "FILTER"):
            return self._parse_projection(Identity())
        return Identity()

    def _parse_multi_projection(self) -> MultiProjection:
        self._expect("LBRACE", "'{'")
        fields = []
        seen = set()
        while True:
            key_token = self._peek()
            key = self._parse_name()
            if key in seen:
                raise self._error(key_token.position, f"duplicate key {key!r}")
            seen.add(key)
            self._expect("COLON", "':' after projection key")
            fields.append((key, self._parse_expression()))
            if self._peek_kind() == "COMMA":
                self._advance()
                continue
            self._expect("RBRACE", "',' or '}'")
            return MultiProjection(tuple(fields))

    def _parse_predicate(self) -> Predicate:
        predicate = self._parse_clause()
        while True:
            connective = self._peek_connective()
            if connective is None:
                return predicate
            self._advance()
            predicate = LogicalExpression(predicate, connective, self._parse_clause())

    def _peek_connective(self) -> Optional[LogicalOperator]:
        token = self._peek()
        if token is None:
            return None
        if token.kind == "AND":
            return LogicalOperator.AND
        if token.kind == "OR":
            return LogicalOperator.OR
        if token.kind == "IDENT":
            return _KEYWORD_CONNECTIVES.get(token.text.lower())
        return None

    def _parse_clause(self) -> Predicate:
        if self._peek_kind() == "LPAREN":
            self._advance()
            predicate = self._parse_predicate()
            self._expect("RPAREN", "')'")
            return predicate

        path = self._parse_field_path()
        operator = ComparisonOperator(
            self._expect("COMPARATOR", "comparison operator").text
        )
        return Comparison(path, operator, self._parse_literal())

    def _parse_literal(self) -> Any:
        token = self._peek()
        if token is None or token.kind not in _LITERAL_KINDS:
            raise self._unexpected("literal value")
        self._advance()
        if token.kind == "NUMBER":
            return json.loads(token.text)
        if token.kind == "RAW_STRING":
            return token.text[1:-1].replace("\\'", "'").replace("\\\\", "\\")

        body = token.text[1:-1].replace("\\`", "`")
        try:
            return json.loads(body)
        except ValueError:
            # Bare words such as `pass` are taken as text.
            return body.strip()


def compile_expression(expression: str) -> Expression:
    """Compile query text into an expression tree.

    Args:
        expression: Query text.

    Returns:
        Root node of the compiled expression.

    Raises:
        ExpressionSyntaxError: If the text is not a valid expression.
    """
    return ExpressionParser(expression).parse()
