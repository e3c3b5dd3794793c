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

"""RunStudentQueries command DTO."""

from dataclasses import dataclass
from typing import Tuple

from student_insights.core.idempotency.value_objects import IdempotencyKey
from student_insights.core.students.entities import StudentRecord


@dataclass(frozen=True)
class RunStudentQueriesCommand:
    """Command to run the student query catalog over a batch.

    Immutable command object. Records are already validated at the boundary.

    Attributes:
        idempotency_key: Request identifier used for deduplication.
        records: Validated student records in request order.
    """

    idempotency_key: IdempotencyKey
    records: Tuple[StudentRecord, ...]
