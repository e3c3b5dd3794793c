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

"""Typed expression tree for declarative queries.

All nodes are immutable. Expressions are built once by the parser and then
interpreted by QueryEvaluator; nothing here knows about student records.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union


class _Missing:
    """Sentinel for "no value" produced by field access on absent data."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class ComparisonOperator(str, Enum):
    """Comparison operators allowed in filter predicates."""

    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    def is_ordering(self) -> bool:
        """Check if operator requires numeric operands.

        Returns:
            True for >, <, >= and <=.
        """
        return self not in {ComparisonOperator.EQ, ComparisonOperator.NE}


class LogicalOperator(str, Enum):
    """Logical connectives between predicate clauses."""

    AND = "&&"
    OR = "||"


@dataclass(frozen=True)
class Identity:
    """The current node, unchanged."""


@dataclass(frozen=True)
class FieldAccess:
    """Dotted field path such as ``subject.science``.

    Attributes:
        path: Field names walked from the current node.
    """

    path: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True)
class Subexpression:
    """Evaluate ``right`` against the result of ``left``."""

    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Wildcard:
    """``[*]`` projection over an array node.

    Attributes:
        source: Expression producing the array.
        projection: Expression applied to every element.
    """

    source: "Expression"
    projection: "Expression"


@dataclass(frozen=True)
class Comparison:
    """``path op literal`` clause of a filter predicate."""

    path: FieldAccess
    operator: ComparisonOperator
    literal: Any


@dataclass(frozen=True)
class LogicalExpression:
    """Two predicate clauses joined by ``&&`` or ``||``."""

    left: "Predicate"
    operator: LogicalOperator
    right: "Predicate"


@dataclass(frozen=True)
class Filter:
    """``[?predicate]`` selection over an array node.

    Attributes:
        source: Expression producing the array.
        predicate: Condition each element must satisfy to survive.
        projection: Expression applied to every survivor.
    """

    source: "Expression"
    predicate: "Predicate"
    projection: "Expression"


@dataclass(frozen=True)
class MultiProjection:
    """``{Key: expr, ...}`` object built from the current node.

    Attributes:
        fields: (output key, expression) pairs in declaration order.
    """

    fields: Tuple[Tuple[str, "Expression"], ...]


Predicate = Union[Comparison, LogicalExpression]

Expression = Union[
    Identity,
    FieldAccess,
    Subexpression,
    Wildcard,
    Filter,
    MultiProjection,
]
