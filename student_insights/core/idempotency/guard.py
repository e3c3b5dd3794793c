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

"""Idempotency guard domain service."""

import threading

from .repositories import ProcessedKeyStore
from .value_objects import IdempotencyKey


class IdempotencyGuard:
    """Tracks processed request keys and short-circuits repeats.

    A key moves one way from unseen to seen and never back. State lives in the
    injected store, so expiring or shared stores can be swapped in without
    changing this contract.
    """

    def __init__(self, store: ProcessedKeyStore) -> None:
        """Initialize guard with a key store.

        Args:
            store: Processed key store implementation.
        """
        self._store = store
        self._lock = threading.Lock()

    def should_process(self, key: IdempotencyKey) -> bool:
        """Check if a request with this key still needs processing.

        Args:
            key: Idempotency key of the request.

        Returns:
            False if the key was marked processed, True otherwise.
        """
        return not self._store.contains(key)

    def mark_processed(self, key: IdempotencyKey) -> None:
        """Record the key as processed.

        Args:
            key: Idempotency key of the request.
        """
        self._store.insert(key)

    def claim(self, key: IdempotencyKey) -> bool:
        """Check and mark a key as one critical section.

        Args:
            key: Idempotency key of the request.

        Returns:
            True if the caller won the key and must process the request,
            False if it was already processed.
        """
        with self._lock:
            if not self.should_process(key):
                return False
            self.mark_processed(key)
            return True
