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

"""Query run response DTO."""

from dataclasses import dataclass, field
from typing import Any, Dict

ALREADY_PROCESSED_MESSAGE = "Request already processed"


@dataclass(frozen=True)
class QueryRunResponse:
    """Response DTO for a query run.

    Attributes:
        idempotency_key: Key the request was processed under.
        results: Query name to result, in catalog order. Empty for duplicates.
        already_processed: True if the key was seen before and nothing ran.
    """

    idempotency_key: str
    results: Dict[str, Any] = field(default_factory=dict)
    already_processed: bool = False

    @staticmethod
    def duplicate(idempotency_key: str) -> "QueryRunResponse":
        """Create the acknowledgment returned for a repeated key."""
        return QueryRunResponse(idempotency_key=idempotency_key, already_processed=True)

    def to_body(self) -> Dict[str, Any]:
        """Return the success body sent to the client."""
        if self.already_processed:
            return {"message": ALREADY_PROCESSED_MESSAGE}
        return dict(self.results)
