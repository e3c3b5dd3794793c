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

"""Interpreter for compiled query expressions.

The evaluator is stateless and never mutates its input, so one instance can
be shared across threads.
"""

import operator
from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import UnsupportedOperandError
from .expressions import (
    MISSING,
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

_COMPARATORS = {
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.NE: operator.ne,
    ComparisonOperator.GT: operator.gt,
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.GE: operator.ge,
    ComparisonOperator.LE: operator.le,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class QueryEvaluator:
    """Evaluates expression trees against JSON-like value trees.

    Mappings are objects, non-string sequences are arrays and everything else
    is a scalar. Absent fields evaluate to MISSING internally and are returned
    to callers as None.
    """

    def __init__(self) -> None:
        self._handlers = {
            Identity: self._eval_identity,
            FieldAccess: self._eval_field_access,
            Subexpression: self._eval_subexpression,
            Wildcard: self._eval_wildcard,
            Filter: self._eval_filter,
            MultiProjection: self._eval_multi_projection,
        }

    def evaluate(self, data: Any, expression: Expression) -> Any:
        """Evaluate an expression against a value tree.

        Args:
            data: Root value, usually the list of record documents.
            expression: Compiled expression tree.

        Returns:
            A list for array-rooted projections, otherwise a single value.
            "No value" is represented as None.

        Raises:
            UnsupportedOperandError: If a projection meets a non-array value.
        """
        return self._to_plain(self._eval(expression, data))

    def _eval(self, node: Expression, value: Any) -> Any:
        return self._handlers[type(node)](node, value)

    def _eval_identity(self, node: Identity, value: Any) -> Any:
        return value

    def _eval_field_access(self, node: FieldAccess, value: Any) -> Any:
        for name in node.path:
            if not isinstance(value, Mapping) or name not in value:
                return MISSING
            value = value[name]
        return value

    def _eval_subexpression(self, node: Subexpression, value: Any) -> Any:
        left = self._eval(node.left, value)
        if left is MISSING:
            return MISSING
        return self._eval(node.right, left)

    def _eval_wildcard(self, node: Wildcard, value: Any) -> Any:
        elements = self._eval_array_source(node.source, value, "wildcard projection")
        if elements is MISSING:
            return MISSING
        return [self._eval(node.projection, element) for element in elements]

    def _eval_filter(self, node: Filter, value: Any) -> Any:
        elements = self._eval_array_source(node.source, value, "filter")
        if elements is MISSING:
            return MISSING
        return [
            self._eval(node.projection, element)
            for element in elements
            if self._matches(node.predicate, element)
        ]

    def _eval_multi_projection(self, node: MultiProjection, value: Any) -> Any:
        if value is MISSING:
            return MISSING
        return {key: self._eval(expression, value) for key, expression in node.fields}

    def _eval_array_source(self, source: Expression, value: Any, operation: str) -> Any:
        elements = self._eval(source, value)
        if elements is MISSING:
            return MISSING
        if not _is_array(elements):
            raise UnsupportedOperandError(operation, type(elements).__name__)
        return elements

    def _matches(self, predicate: Predicate, element: Any) -> bool:
        if isinstance(predicate, LogicalExpression):
            left = self._matches(predicate.left, element)
            right = self._matches(predicate.right, element)
            if predicate.operator is LogicalOperator.AND:
                return left and right
            return left or right
        return self._compare(predicate, element)

    def _compare(self, comparison: Comparison, element: Any) -> bool:
        actual = self._eval_field_access(comparison.path, element)
        if actual is MISSING:
            return False
        expected = comparison.literal
        if comparison.operator.is_ordering():
            if not (_is_number(actual) and _is_number(expected)):
                return False
        elif _is_number(actual) != _is_number(expected):
            # 1 == True must not hold
            return comparison.operator is ComparisonOperator.NE
        return _COMPARATORS[comparison.operator](actual, expected)

    def _to_plain(self, value: Any) -> Any:
        if value is MISSING:
            return None
        if isinstance(value, Mapping):
            return {key: self._to_plain(item) for key, item in value.items()}
        if _is_array(value):
            return [self._to_plain(item) for item in value]
        return value
