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

"""Request schemas for student query endpoints."""

from typing import Annotated, List, Tuple, Union

from pydantic import AliasChoices, BaseModel, Field, StrictFloat, StrictInt, StrictStr

from student_insights.core.students import (
    Percentage,
    StudentRecord,
    SubjectResult,
    SubjectScores,
)

# Integral input stays integral in query output.
Score = Union[
    Annotated[StrictInt, Field(ge=0, le=100)],
    Annotated[StrictFloat, Field(ge=0, le=100)],
]


class SubjectSchema(BaseModel):
    """Subject marks and result."""

    science: Score
    maths: Score
    result: SubjectResult

    def to_entity(self) -> SubjectScores:
        """Map to the domain entity."""
        return SubjectScores(
            science=Percentage(self.science),
            maths=Percentage(self.maths),
            result=self.result,
        )


class StudentSchema(BaseModel):
    """One student entry.

    ``Subject`` and ``Attendance`` are accepted as aliases for payloads that
    use capitalized keys.
    """

    name: StrictStr
    subject: SubjectSchema = Field(
        validation_alias=AliasChoices("subject", "Subject"),
    )
    attendance: Score = Field(
        validation_alias=AliasChoices("attendance", "Attendance"),
    )

    def to_entity(self) -> StudentRecord:
        """Map to the domain entity."""
        return StudentRecord(
            name=self.name,
            subject=self.subject.to_entity(),
            attendance=Percentage(self.attendance),
        )


class StudentQueryRequest(BaseModel):
    """Request body: a batch of student entries under ``result``."""

    result: List[StudentSchema]

    def to_records(self) -> Tuple[StudentRecord, ...]:
        """Map the batch to domain records, preserving order."""
        return tuple(student.to_entity() for student in self.result)
