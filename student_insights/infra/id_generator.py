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

"""Infrastructure layer for request identifier generation."""

import uuid

from student_insights.core.idempotency.repositories import UUIDGenerator
from student_insights.core.idempotency.value_objects import IdempotencyKey


class UUIDv4Generator(UUIDGenerator):
    """UUID v4 generator for general purpose use.

    Used to mint a request identifier when the caller supplies none, so
    unkeyed requests are never mistaken for one another.
    """

    def generate(self) -> uuid.UUID:
        """Generate a new UUID v4.

        Returns:
            uuid.UUID: A new UUID v4 object.
        """
        return uuid.uuid4()


def generate_request_key(generator: UUIDGenerator) -> IdempotencyKey:
    """Build an idempotency key from a freshly generated UUID.

    Args:
        generator: UUID source.

    Returns:
        IdempotencyKey wrapping the UUID string.
    """
    return IdempotencyKey(str(generator.generate()))
