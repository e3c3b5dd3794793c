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

"""Wiring shared by the HTTP and event adapters."""

from functools import lru_cache
from typing import Optional

from student_insights.core.idempotency import (
    IdempotencyGuard,
    IdempotencyKey,
    ProcessedKeyStore,
    UUIDGenerator,
)
from student_insights.core.queries import build_student_catalog
from student_insights.infra import (
    InMemoryProcessedKeyStore,
    UUIDv4Generator,
    generate_request_key,
)
from student_insights.orchestrator.students.use_cases import RunStudentQueriesUseCase


def build_run_queries_use_case(
    store: Optional[ProcessedKeyStore] = None,
) -> RunStudentQueriesUseCase:
    """Create the use case with a compiled catalog and an idempotency guard.

    Args:
        store: Processed key store. Creates an in-memory store if not provided.

    Returns:
        Ready to use RunStudentQueriesUseCase.

    Raises:
        ExpressionSyntaxError: If the built-in query set fails to compile.
    """
    guard = IdempotencyGuard(store or InMemoryProcessedKeyStore())
    return RunStudentQueriesUseCase(guard=guard, catalog=build_student_catalog())


@lru_cache(maxsize=1)
def get_run_queries_use_case() -> RunStudentQueriesUseCase:
    """Return the process-wide use case shared by the HTTP and event adapters."""
    return build_run_queries_use_case()


def resolve_idempotency_key(
    *candidates: Optional[str],
    generator: Optional[UUIDGenerator] = None,
) -> IdempotencyKey:
    """Pick the first non-empty request identifier.

    Args:
        candidates: Identifiers in priority order; None or "" are skipped.
        generator: UUID source used when no candidate is present.

    Returns:
        IdempotencyKey for the request.

    Raises:
        ValueError: If the chosen identifier is longer than allowed.
    """
    for candidate in candidates:
        if candidate:
            return IdempotencyKey(candidate)
    return generate_request_key(generator or UUIDv4Generator())
