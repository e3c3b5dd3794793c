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

"""Domain exceptions for the query evaluator."""


class QueryDomainError(Exception):
    """Base exception for all query domain errors."""

    def __init__(self, message: str) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
        self.message = message


class ExpressionSyntaxError(QueryDomainError):
    """Query expression could not be compiled."""

    def __init__(self, expression: str, position: int, reason: str) -> None:
        """Initialize expression syntax error.

        Args:
            expression: The full expression text.
            position: Zero-based character offset of the failure.
            reason: What the parser expected or rejected.
        """
        super().__init__(
            f"Invalid query expression {expression!r} at position {position}: {reason}"
        )
        self.expression = expression
        self.position = position
        self.reason = reason


class UnsupportedOperandError(QueryDomainError):
    """Expression was applied to a value of the wrong shape."""

    def __init__(self, operation: str, operand_type: str) -> None:
        """Initialize unsupported operand error.

        Args:
            operation: Expression node that rejected the operand.
            operand_type: Python type name of the offending value.
        """
        super().__init__(
            f"Unsupported operand shape for {operation}: expected an array, "
            f"got {operand_type}"
        )
        self.operation = operation
        self.operand_type = operand_type


class UnknownQueryError(QueryDomainError):
    """Named query is not part of the catalog."""

    def __init__(self, name: str) -> None:
        """Initialize unknown query error.

        Args:
            name: The query name that was requested.
        """
        super().__init__(f"Unknown query: {name}")
        self.name = name
