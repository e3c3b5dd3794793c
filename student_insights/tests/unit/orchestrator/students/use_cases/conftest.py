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

"""Shared fixtures for use case tests."""

from typing import Any, Dict, List, Set

import pytest

from student_insights.core.idempotency import IdempotencyGuard, IdempotencyKey
from student_insights.core.queries import QueryCatalog, build_student_catalog
from student_insights.core.students import (
    Percentage,
    StudentRecord,
    SubjectResult,
    SubjectScores,
)


class FakeProcessedKeyStore:
    """In-memory fake implementation of ProcessedKeyStore."""

    def __init__(self) -> None:
        """Initialize the fake store."""
        self._keys: Set[str] = set()

    def contains(self, key: IdempotencyKey) -> bool:
        """Check if a key was inserted."""
        return str(key) in self._keys

    def insert(self, key: IdempotencyKey) -> None:
        """Record a key."""
        self._keys.add(str(key))


class RecordingCatalog:
    """Catalog wrapper that records every batch it evaluates."""

    def __init__(self, catalog: QueryCatalog) -> None:
        """Initialize the wrapper."""
        self._catalog = catalog
        self.batches: List[List[Dict[str, Any]]] = []

    def run_all(self, documents):
        """Record the batch and delegate."""
        self.batches.append(documents)
        return self._catalog.run_all(documents)


def build_record(name, science, maths, result, attendance) -> StudentRecord:
    """Build a StudentRecord from plain values."""
    return StudentRecord(
        name=name,
        subject=SubjectScores(
            science=Percentage(science),
            maths=Percentage(maths),
            result=SubjectResult(result),
        ),
        attendance=Percentage(attendance),
    )


@pytest.fixture
def key_store():
    """Provide fake key store."""
    return FakeProcessedKeyStore()


@pytest.fixture
def guard(key_store):
    """Provide a guard over the fake store."""
    return IdempotencyGuard(key_store)


@pytest.fixture
def recording_catalog():
    """Provide the student catalog wrapped for call recording."""
    return RecordingCatalog(build_student_catalog())


@pytest.fixture
def records():
    """Two validated student records."""
    return (
        build_record("A", 90, 70, "pass", 40),
        build_record("B", 100, 50, "fail", 90),
    )
