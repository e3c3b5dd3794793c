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

"""Shared pytest fixtures for Student Insights tests."""

import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def make_student(
    name: str,
    science: float = 50,
    maths: float = 50,
    result: str = "pass",
    attendance: float = 75,
) -> Dict[str, Any]:
    """Build one student entry as it appears on the wire."""
    return {
        "name": name,
        "subject": {"science": science, "maths": maths, "result": result},
        "attendance": attendance,
    }


@pytest.fixture
def student_factory():
    """Provide the student entry builder."""
    return make_student


@pytest.fixture
def sample_students():
    """A small mixed batch covering every query."""
    return [
        make_student("Asha", science=90, maths=70, result="pass", attendance=40),
        make_student("Ben", science=100, maths=50, result="fail", attendance=90),
        make_student("Chen", science=60, maths=100, result="pass", attendance=85),
        make_student("Dara", science=80, maths=45, result="fail", attendance=30),
    ]


@pytest.fixture
def fresh_use_case():
    """Create a use case with its own empty key store."""
    from student_insights.api.students.dependencies import (  # noqa: PLC0415
        build_run_queries_use_case,
    )
    return build_run_queries_use_case()


@pytest.fixture
def test_client(fresh_use_case) -> Generator:
    """Create a FastAPI TestClient with an isolated idempotency store.

    Args:
        fresh_use_case: Use case fixture swapped into the routes module.

    Yields:
        TestClient configured for testing.
    """
    from fastapi.testclient import TestClient  # noqa: PLC0415

    from student_insights.api.students import routes  # noqa: PLC0415
    from student_insights.main import app  # noqa: PLC0415

    original_use_case = routes._use_case  # noqa: W0212
    routes._use_case = fresh_use_case

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    routes._use_case = original_use_case  # noqa: W0212
