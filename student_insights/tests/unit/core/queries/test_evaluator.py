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

"""Unit tests for QueryEvaluator."""

import copy

import pytest

from student_insights.core.queries.evaluator import QueryEvaluator
from student_insights.core.queries.exceptions import UnsupportedOperandError
from student_insights.core.queries.expressions import MISSING
from student_insights.core.queries.parser import compile_expression


@pytest.fixture
def evaluator():
    """Provide a shared evaluator."""
    return QueryEvaluator()


def _run(evaluator, data, expression):
    return evaluator.evaluate(data, compile_expression(expression))


class TestFieldAccess:
    """Tests for path walking."""

    def test_nested_value(self, evaluator):
        """Nested paths resolve through mappings."""
        data = {"subject": {"science": 91}}
        assert _run(evaluator, data, "subject.science") == 91

    def test_absent_field_is_no_value(self, evaluator):
        """An absent field yields None instead of failing."""
        assert _run(evaluator, {"subject": {}}, "subject.maths") is None

    def test_field_of_scalar_is_no_value(self, evaluator):
        """Walking into a scalar yields None."""
        assert _run(evaluator, {"name": "Asha"}, "name.first") is None

    def test_missing_sentinel_is_falsy_singleton(self):
        """MISSING is a single falsy object."""
        assert not MISSING
        assert type(MISSING)() is MISSING
        assert repr(MISSING) == "MISSING"


class TestWildcardProjection:
    """Tests for [*] projections."""

    def test_preserves_order_and_length(self, evaluator, sample_students):
        """One result per element, in input order."""
        assert _run(evaluator, sample_students, "[*].name") == [
            "Asha",
            "Ben",
            "Chen",
            "Dara",
        ]

    def test_missing_field_keeps_element(self, evaluator, student_factory):
        """A record lacking a field still produces an entry."""
        incomplete = {"name": "Eve", "subject": {"science": 55, "result": "pass"}}
        data = [incomplete, student_factory("Finn", maths=64)]

        assert _run(evaluator, data, "[*].subject.maths") == [None, 64]
        assert _run(evaluator, data, "[*].name") == ["Eve", "Finn"]
        assert _run(evaluator, data, "[*].subject.science") == [55, 50]

    def test_empty_array(self, evaluator):
        """Projection over an empty array is an empty list."""
        assert _run(evaluator, [], "[*].name") == []

    def test_nested_projection(self, evaluator):
        """Projections nest and keep the inner grouping."""
        data = {
            "classes": [
                {"students": [{"name": "a"}, {"name": "b"}]},
                {"students": [{"name": "c"}]},
            ]
        }
        assert _run(evaluator, data, "classes[*].students[*].name") == [["a", "b"], ["c"]]

    def test_projection_of_absent_array_is_no_value(self, evaluator):
        """Projecting over an absent field yields None, not an error."""
        assert _run(evaluator, {}, "students[*].name") is None

    @pytest.mark.parametrize("data", [{"a": 1}, "text", 42, None])
    def test_non_array_operand_is_rejected(self, evaluator, data):
        """Wildcard over a non-array value is an operand shape error."""
        with pytest.raises(UnsupportedOperandError) as exc_info:
            _run(evaluator, data, "[*]")
        assert exc_info.value.operation == "wildcard projection"

    def test_non_array_inside_projection_is_rejected(self, evaluator, sample_students):
        """Shape errors inside a projection abort the whole evaluation."""
        with pytest.raises(UnsupportedOperandError):
            _run(evaluator, sample_students, "[*].name[*]")


class TestFilter:
    """Tests for [?predicate] selection."""

    def test_strict_greater_than(self, evaluator, sample_students):
        """> excludes the boundary value."""
        assert _run(evaluator, sample_students, "[?subject.science > `80`].name") == [
            "Asha",
            "Ben",
        ]

    def test_greater_or_equal_includes_boundary(self, evaluator, sample_students):
        """>= keeps the boundary value."""
        assert _run(evaluator, sample_students, "[?subject.science >= `80`].name") == [
            "Asha",
            "Ben",
            "Dara",
        ]

    def test_filter_without_projection_keeps_elements(self, evaluator):
        """Survivors are returned whole when nothing is projected."""
        data = [{"a": 1}, {"a": 5}, {"a": 3}]
        assert _run(evaluator, data, "[?a > `2`]") == [{"a": 5}, {"a": 3}]

    def test_string_equality(self, evaluator, sample_students):
        """Text literals compare by exact equality."""
        assert _run(evaluator, sample_students, "[?subject.result == 'fail'].name") == [
            "Ben",
            "Dara",
        ]
        assert _run(evaluator, sample_students, "[?subject.result == 'Fail'].name") == []

    def test_not_equal(self, evaluator, sample_students):
        """!= keeps elements whose value differs."""
        assert _run(evaluator, sample_students, "[?subject.result != 'pass'].name") == [
            "Ben",
            "Dara",
        ]

    def test_absent_field_excludes_element(self, evaluator):
        """Comparisons on absent fields are false, even for !=."""
        data = [{"name": "x"}, {"name": "y", "score": 10}]
        assert _run(evaluator, data, "[?score != `5`].name") == ["y"]
        assert _run(evaluator, data, "[?score < `50`].name") == ["y"]

    def test_ordering_requires_numbers(self, evaluator):
        """Ordering comparisons never hold for non-numeric values."""
        data = [{"v": "90"}, {"v": True}, {"v": 90}]
        assert _run(evaluator, data, "[?v > `80`].v") == [90]

    def test_numbers_compare_numerically(self, evaluator):
        """Integral and float values compare as numbers."""
        data = [{"v": 100.0}, {"v": 100}, {"v": 99.5}]
        assert _run(evaluator, data, "[?v == `100`].v") == [100.0, 100]

    def test_booleans_are_not_numbers(self, evaluator):
        """true does not equal 1."""
        data = [{"v": True}, {"v": 1}]
        assert _run(evaluator, data, "[?v == `1`].v") == [1]
        assert _run(evaluator, data, "[?v == `true`].v") == [True]

    def test_and_requires_both_clauses(self, evaluator, sample_students):
        """AND keeps only elements where both clauses hold."""
        expression = "[?subject.result == `\"pass\"` && attendance < `50`].name"
        assert _run(evaluator, sample_students, expression) == ["Asha"]

    def test_or_accepts_either_clause(self, evaluator, sample_students):
        """OR keeps elements where either clause holds."""
        expression = "[?subject.science == `100` || subject.maths == `100`].name"
        assert _run(evaluator, sample_students, expression) == ["Ben", "Chen"]

    def test_left_to_right_evaluation(self, evaluator):
        """Connectives have no precedence over each other."""
        data = [{"x": 1, "y": 0, "z": 0}]
        assert _run(evaluator, data, "[?x == `1` || y == `1` && z == `1`]") == []
        assert _run(evaluator, data, "[?x == `1` || (y == `1` && z == `1`)]") == data

    def test_filter_over_non_array_is_rejected(self, evaluator):
        """Filtering a mapping is an operand shape error."""
        with pytest.raises(UnsupportedOperandError) as exc_info:
            _run(evaluator, {"a": 1}, "[?a == `1`]")
        assert exc_info.value.operation == "filter"
        assert exc_info.value.operand_type == "dict"


class TestMultiProjection:
    """Tests for {Key: path} objects."""

    def test_per_element_objects(self, evaluator, sample_students):
        """Each element becomes an object with the declared keys."""
        result = _run(evaluator, sample_students, "[*].{Name: name, Result: subject.result}")
        assert result[0] == {"Name": "Asha", "Result": "pass"}
        assert len(result) == len(sample_students)

    def test_key_order_follows_declaration(self, evaluator):
        """Output keys keep the declared order."""
        data = {"a": 1, "b": 2}
        result = _run(evaluator, data, "{Second: b, First: a}")
        assert list(result) == ["Second", "First"]

    def test_absent_values_become_none(self, evaluator):
        """Absent fields appear with a None value."""
        result = _run(evaluator, [{"name": "x"}], "[*].{Name: name, Result: subject.result}")
        assert result == [{"Name": "x", "Result": None}]

    def test_projection_of_subtree(self, evaluator):
        """a.{X: b} projects from the a subtree."""
        data = {"subject": {"science": 70, "maths": 80}}
        assert _run(evaluator, data, "subject.{S: science, M: maths}") == {"S": 70, "M": 80}
        assert _run(evaluator, {}, "subject.{S: science}") is None


class TestPurity:
    """Evaluation is a pure function of its inputs."""

    def test_input_is_not_mutated(self, evaluator, sample_students):
        """The input batch is unchanged after evaluation."""
        snapshot = copy.deepcopy(sample_students)
        _run(evaluator, sample_students, "[?subject.science > `80`]")
        _run(evaluator, sample_students, "[*].{Name: name, Result: subject.result}")
        assert sample_students == snapshot

    def test_repeated_evaluation_is_identical(self, evaluator, sample_students):
        """Same expression and data give the same result."""
        expression = compile_expression("[?subject.maths < `60`].{N: name}")
        first = evaluator.evaluate(sample_students, expression)
        second = evaluator.evaluate(sample_students, expression)
        assert first == second

    def test_results_do_not_alias_input(self, evaluator):
        """Mutating a returned element leaves the input untouched."""
        data = [{"a": {"b": 1}}]
        result = _run(evaluator, data, "[*].a")
        result[0]["b"] = 2
        assert data == [{"a": {"b": 1}}]
