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

"""In-process storage for processed idempotency keys."""

from typing import Set

from student_insights.core.idempotency.repositories import ProcessedKeyStore
from student_insights.core.idempotency.value_objects import IdempotencyKey


class InMemoryProcessedKeyStore(ProcessedKeyStore):
    """Process-wide set of processed keys.

    Keys are kept for the lifetime of the process with no eviction, and a
    restarted process starts empty. Memory grows with the number of distinct
    keys seen.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._keys: Set[str] = set()

    def contains(self, key: IdempotencyKey) -> bool:
        """Check if a key has been recorded."""
        return str(key) in self._keys

    def insert(self, key: IdempotencyKey) -> None:
        """Record a key as processed."""
        self._keys.add(str(key))

    def __len__(self) -> int:
        return len(self._keys)
