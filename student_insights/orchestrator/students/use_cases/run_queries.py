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

"""RunStudentQueries use case implementation."""

import logging
from typing import Any, Dict, List

from student_insights.core.idempotency.guard import IdempotencyGuard
from student_insights.core.queries.catalog import QueryCatalog

from ..commands import RunStudentQueriesCommand
from ..dtos import QueryRunResponse

logger = logging.getLogger(__name__)


class RunStudentQueriesUseCase:
    """Use case for answering the query catalog over a student batch.

    This use case orchestrates a run with the following guarantees:
    - Idempotency: a repeated key is acknowledged without evaluating queries,
      whatever the payload
    - Purity: records are never mutated; equal batches give equal results
    - Ordering: results follow catalog order, projections follow batch order

    Attributes:
        guard: Idempotency guard.
        catalog: Compiled query catalog.
    """

    def __init__(self, guard: IdempotencyGuard, catalog: QueryCatalog) -> None:
        """Initialize use case with its collaborators.

        Args:
            guard: Idempotency guard backed by a key store.
            catalog: Query catalog to evaluate.
        """
        self._guard = guard
        self._catalog = catalog

    def execute(self, command: RunStudentQueriesCommand) -> QueryRunResponse:
        """Execute the query run with idempotency.

        The key is claimed before evaluation, so a request that fails during
        evaluation stays processed.

        Args:
            command: Command carrying the key and validated records.

        Returns:
            QueryRunResponse with results, or a duplicate acknowledgment.

        Raises:
            UnsupportedOperandError: If a query does not fit the record shape.
        """
        key = str(command.idempotency_key)
        if not self._guard.claim(command.idempotency_key):
            logger.info("Idempotent request detected: %s", key)
            return QueryRunResponse.duplicate(key)

        results = self._catalog.run_all(self._to_documents(command))
        logger.info(
            "Queries completed for %s: %d records, %d queries",
            key,
            len(command.records),
            len(results),
        )
        return QueryRunResponse(idempotency_key=key, results=results)

    def _to_documents(self, command: RunStudentQueriesCommand) -> List[Dict[str, Any]]:
        """Map domain records to the value tree the evaluator walks."""
        return [record.as_document() for record in command.records]
