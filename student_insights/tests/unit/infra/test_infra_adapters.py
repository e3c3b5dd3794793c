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

"""Unit tests for infrastructure adapters."""

import json
import logging
import re
import uuid

import pytest

from student_insights.core.idempotency import IdempotencyKey
from student_insights.infra.id_generator import UUIDv4Generator, generate_request_key
from student_insights.infra.key_store import InMemoryProcessedKeyStore
from student_insights.infra.logging import JsonFormatter, setup_logging


class _FixedUUIDGenerator:
    """UUID generator that returns a predetermined UUID."""

    def __init__(self, value: str):
        self._value = uuid.UUID(value)

    def generate(self) -> uuid.UUID:
        """Return the predetermined UUID."""
        return self._value


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestUUIDv4Generator:
    """Tests covering UUIDv4Generator behavior."""

    def test_generate_returns_uuid_v4(self) -> None:
        """Generated UUID must be version 4."""
        generated = UUIDv4Generator().generate()

        assert isinstance(generated, uuid.UUID)
        assert generated.version == 4

    def test_generate_is_unique(self) -> None:
        """Generator should yield unique IDs over multiple invocations."""
        generator = UUIDv4Generator()

        generated = {generator.generate() for _ in range(50)}

        assert len(generated) == 50

    def test_generate_request_key(self) -> None:
        """Request keys wrap the generated UUID string."""
        key = generate_request_key(
            _FixedUUIDGenerator("123e4567-e89b-42d3-a456-426614174000")
        )

        assert key == IdempotencyKey("123e4567-e89b-42d3-a456-426614174000")
        assert re.match(r"^[0-9a-f-]{36}$", str(key))


class TestInMemoryProcessedKeyStore:
    """Tests for the process-wide key store."""

    def test_starts_empty(self) -> None:
        """A fresh store has seen nothing."""
        store = InMemoryProcessedKeyStore()

        assert store.contains(IdempotencyKey("req-1")) is False
        assert len(store) == 0

    def test_insert_then_contains(self) -> None:
        """Inserted keys are reported as contained."""
        store = InMemoryProcessedKeyStore()
        store.insert(IdempotencyKey("req-1"))

        assert store.contains(IdempotencyKey("req-1")) is True
        assert store.contains(IdempotencyKey("req-2")) is False

    def test_insert_is_idempotent(self) -> None:
        """Inserting the same key twice stores it once."""
        store = InMemoryProcessedKeyStore()
        store.insert(IdempotencyKey("req-1"))
        store.insert(IdempotencyKey("req-1"))

        assert len(store) == 1

    def test_instances_do_not_share_state(self) -> None:
        """A new store starts empty, like a restarted process."""
        first = InMemoryProcessedKeyStore()
        first.insert(IdempotencyKey("req-1"))

        assert InMemoryProcessedKeyStore().contains(IdempotencyKey("req-1")) is False


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter_includes_extra_fields(self) -> None:
        """Extra fields are merged into the JSON payload."""
        record = logging.LogRecord(
            "student_insights.test", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        record.idempotency_key = "req-1"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "student_insights.test"
        assert payload["idempotency_key"] == "req-1"

    def test_setup_logging_sets_level(self, restore_root_logger) -> None:
        """Root level follows the configured level."""
        setup_logging("debug", "json")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_rejects_unknown_format(self, restore_root_logger) -> None:
        """Only text and json formats are supported."""
        with pytest.raises(ValueError, match="Unsupported log format"):
            setup_logging("INFO", "xml")
