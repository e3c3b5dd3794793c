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

"""Named query catalog compiled once at startup."""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .evaluator import QueryEvaluator
from .exceptions import UnknownQueryError
from .expressions import Expression
from .parser import compile_expression

logger = logging.getLogger(__name__)

STUDENT_QUERY_DEFINITIONS: Dict[str, str] = {
    "studentNames": "[*].name",
    "scienceMarks": "[*].subject.science",
    "scienceAbove80": "[?subject.science > `80`].name",
    "passedStudents": '[?subject.result == `"pass"`].name',
    "passedLowAttendance": (
        '[?subject.result == `"pass"` && attendance < `50`].name'
    ),
    "perfectScore": "[?subject.science == `100` || subject.maths == `100`].name",
    "nameAndResult": "[*].{Name: name, Result: subject.result}",
}


class QueryCatalog:
    """Ordered set of compiled, named query expressions.

    Attributes:
        names: Query names in declaration order.
    """

    def __init__(
        self,
        queries: Tuple[Tuple[str, Expression], ...],
        evaluator: Optional[QueryEvaluator] = None,
    ) -> None:
        """Initialize catalog from already compiled expressions.

        Args:
            queries: (name, expression) pairs in output order.
            evaluator: Evaluator to run queries with. Creates default if not provided.
        """
        self._queries = dict(queries)
        self._evaluator = evaluator or QueryEvaluator()
        self.names = tuple(name for name, _ in queries)

    @classmethod
    def from_definitions(
        cls,
        definitions: Mapping[str, str],
        evaluator: Optional[QueryEvaluator] = None,
    ) -> "QueryCatalog":
        """Compile query text into a catalog.

        Args:
            definitions: Mapping of query name to expression text.
            evaluator: Optional evaluator override.

        Returns:
            QueryCatalog with every definition compiled.

        Raises:
            ExpressionSyntaxError: If any definition is malformed.
        """
        compiled = tuple(
            (name, compile_expression(text)) for name, text in definitions.items()
        )
        logger.debug("Compiled %d query definitions", len(compiled))
        return cls(compiled, evaluator=evaluator)

    def expression(self, name: str) -> Expression:
        """Return the compiled expression for a query name.

        Raises:
            UnknownQueryError: If the name is not in the catalog.
        """
        try:
            return self._queries[name]
        except KeyError:
            raise UnknownQueryError(name) from None

    def run_query(self, name: str, documents: Any) -> Any:
        """Evaluate a single named query."""
        return self._evaluator.evaluate(documents, self.expression(name))

    def run_all(self, documents: Any) -> Dict[str, Any]:
        """Evaluate every query against the same documents.

        Args:
            documents: Ordered list of record documents.

        Returns:
            Mapping of query name to result, in declaration order.

        Raises:
            UnsupportedOperandError: If a query does not fit the data shape.
        """
        return {
            name: self._evaluator.evaluate(documents, expression)
            for name, expression in self._queries.items()
        }


def build_student_catalog() -> QueryCatalog:
    """Compile the fixed student query set."""
    return QueryCatalog.from_definitions(STUDENT_QUERY_DEFINITIONS)
