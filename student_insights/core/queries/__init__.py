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

"""Declarative query domain module."""

from .catalog import STUDENT_QUERY_DEFINITIONS, QueryCatalog, build_student_catalog
from .evaluator import QueryEvaluator
from .exceptions import (
    ExpressionSyntaxError,
    QueryDomainError,
    UnknownQueryError,
    UnsupportedOperandError,
)
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
    Subexpression,
    Wildcard,
)
from .parser import ExpressionParser, compile_expression

__all__ = [
    "STUDENT_QUERY_DEFINITIONS",
    "QueryCatalog",
    "build_student_catalog",
    "QueryEvaluator",
    "ExpressionSyntaxError",
    "QueryDomainError",
    "UnknownQueryError",
    "UnsupportedOperandError",
    "MISSING",
    "Comparison",
    "ComparisonOperator",
    "Expression",
    "FieldAccess",
    "Filter",
    "Identity",
    "LogicalExpression",
    "LogicalOperator",
    "MultiProjection",
    "Subexpression",
    "Wildcard",
    "ExpressionParser",
    "compile_expression",
]
