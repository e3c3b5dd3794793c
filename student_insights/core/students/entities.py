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

"""Student record entities."""

from dataclasses import dataclass
from typing import Any, Dict

from .value_objects import Percentage, SubjectResult


@dataclass(frozen=True)
class SubjectScores:
    """Per-subject marks and overall result.

    Attributes:
        science: Science mark.
        maths: Maths mark.
        result: Pass or fail outcome.
    """

    science: Percentage
    maths: Percentage
    result: SubjectResult

    def as_document(self) -> Dict[str, Any]:
        """Return the plain value tree used by query evaluation."""
        return {
            "science": self.science.value,
            "maths": self.maths.value,
            "result": self.result.value,
        }


@dataclass(frozen=True)
class StudentRecord:
    """One validated student entry.

    Immutable once constructed. Field values have already passed range and
    enum validation, so query evaluation never re-checks them.

    Attributes:
        name: Student name.
        subject: Subject marks and result.
        attendance: Attendance percentage.
    """

    name: str
    subject: SubjectScores
    attendance: Percentage

    def __post_init__(self) -> None:
        """Validate name type."""
        if not isinstance(self.name, str):
            raise ValueError(f"Student name must be a string, got {self.name!r}")

    def as_document(self) -> Dict[str, Any]:
        """Return the plain value tree used by query evaluation.

        Returns:
            Fresh dictionary; callers may not affect the record through it.
        """
        return {
            "name": self.name,
            "subject": self.subject.as_document(),
            "attendance": self.attendance.value,
        }
