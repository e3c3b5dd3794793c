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

"""Repository port interfaces (Protocols) for request deduplication.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

import uuid
from typing import Protocol

from .value_objects import IdempotencyKey


class ProcessedKeyStore(Protocol):
    """Store port for idempotency keys that have been processed."""

    def contains(self, key: IdempotencyKey) -> bool:
        """Check if a key has been recorded.

        Args:
            key: Idempotency key.

        Returns:
            True if the key was inserted before, False otherwise.
        """
        ...

    def insert(self, key: IdempotencyKey) -> None:
        """Record a key as processed.

        Args:
            key: Idempotency key. Inserting an existing key is a no-op.
        """
        ...


class UUIDGenerator(Protocol):
    """Generator port for fallback request identifiers."""

    def generate(self) -> uuid.UUID:
        """Generate a UUID object.

        Returns:
            uuid.UUID: A new UUID.
        """
        ...
