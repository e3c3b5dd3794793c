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

"""Value objects for Student domain."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

Number = Union[int, float]


class SubjectResult(str, Enum):
    """Overall subject outcome. Closed set."""

    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class Percentage:
    """Score or attendance on the 0-100 scale.

    Attributes:
        value: Numeric value, inclusive bounds.

    Raises:
        ValueError: If value is not a number or is out of range.
    """

    value: Number

    MIN_VALUE: ClassVar[int] = 0
    MAX_VALUE: ClassVar[int] = 100

    def __post_init__(self) -> None:
        """Validate numeric type and range."""
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError(f"Percentage must be a number, got {self.value!r}")
        if not self.MIN_VALUE <= self.value <= self.MAX_VALUE:
            raise ValueError(
                f"Percentage must be between {self.MIN_VALUE} and "
                f"{self.MAX_VALUE}, got {self.value}"
            )

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
