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

"""FastAPI routes for student queries."""

import logging
from typing import Optional

from fastapi import APIRouter, Header, status
from fastapi.responses import JSONResponse

from student_insights.api.error_handlers import INVALID_INPUT_MESSAGE, error_body
from student_insights.orchestrator.students.commands import RunStudentQueriesCommand

from .dependencies import get_run_queries_use_case, resolve_idempotency_key
from .schemas import StudentQueryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])

_use_case = get_run_queries_use_case()


@router.post("/queries", status_code=status.HTTP_200_OK)
def run_student_queries(
    payload: StudentQueryRequest,
    idempotency_key: Optional[str] = Header(default=None, alias="Idempotency-Key"),
    request_id: Optional[str] = Header(default=None, alias="X-Request-ID"),
):
    """Run the fixed query set over a validated batch of students.

    Returns the query results, or an acknowledgment when the request key was
    already processed.
    """
    try:
        key = resolve_idempotency_key(idempotency_key, request_id)
    except ValueError as exc:
        logger.warning("Rejected idempotency key: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                INVALID_INPUT_MESSAGE,
                [{"field": "Idempotency-Key", "message": str(exc), "type": "value_error"}],
            ),
        )

    logger.info("Received request %s with %d records", key, len(payload.result))
    command = RunStudentQueriesCommand(idempotency_key=key, records=payload.to_records())
    return _use_case.execute(command).to_body()
