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

"""Value objects for request deduplication."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class IdempotencyKey:
    """Opaque per-request deduplication token.

    Attributes:
        value: Idempotency key string (1-255 characters).

    Raises:
        ValueError: If value length is invalid.
    """

    value: str

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 255

    def __post_init__(self) -> None:
        """Validate key length."""
        length = len(self.value)
        if length < self.MIN_LENGTH or length > self.MAX_LENGTH:
            raise ValueError(
                f"Idempotency key length must be between {self.MIN_LENGTH} "
                f"and {self.MAX_LENGTH} characters, got {length}"
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value
