"""Unit tests for record normalisation and total-benefits derivation."""

import json
import math
from unittest.mock import MagicMock

import pytest

from director_benefits.domain.models import PLACEHOLDER
from director_benefits.normalization import (
    RecordNormalizer,
    extract_records,
    filter_directors,
    is_director_role,
)
from director_benefits.normalization.totals import (
    calculate_total_benefits,
    explicit_total,
    largest_numeric_value,
)

NAN = float("nan")


@pytest.fixture
def normalizer():
    """Normaliser with a mock logger."""
    return RecordNormalizer(logger_instance=MagicMock())


class TestIsDirectorRole:
    """Tests for is_director_role()."""

    @pytest.mark.parametrize(
        "role",
        ["Director", "Senior Director of Engineering", "FINANCE DIRECTOR", "non-executive director"],
    )
    def test_director_roles(self, role):
        assert is_director_role(role) is True

    @pytest.mark.parametrize("role", ["Engineer", "Head of Finance", "", None, 42])
    def test_other_roles(self, role):
        assert is_director_role(role) is False

    def test_non_string_role_is_not_director(self):
        assert is_director_role(["Director"]) is False


class TestCalculateTotalBenefits:
    """Tests for the layered total derivation."""

    def test_explicit_total_is_preserved(self):
        record = {"totalBenefits": 412000, "salary": 900000}
        assert calculate_total_benefits(record, 900000.0, NAN) == 412000

    def test_explicit_total_string_is_coerced(self):
        record = {"total": "£240,000"}
        assert calculate_total_benefits(record, NAN, NAN) == 240000

    def test_candidate_field_priority(self):
        record = {"benefits": 50, "totalBenefit": 70}
        assert explicit_total(record) == 70

    def test_zero_explicit_value_stops_candidate_search(self):
        """A present-but-zero candidate is taken; later candidates are not consulted."""
        record = {"totalBenefits": 0, "cashValue": 500}
        assert explicit_total(record) == 0
        # The max-scan still sees cashValue
        assert calculate_total_benefits(record, NAN, NAN) == 500

    def test_none_candidate_is_skipped(self):
        record = {"totalBenefits": None, "total": 300}
        assert explicit_total(record) == 300

    def test_zero_total_falls_back_to_largest_value(self):
        """With a zero total, the max-scan includes the salary and allowances values."""
        record = {"totalBenefits": 0, "salary": 100, "allowances": 50}
        assert calculate_total_benefits(record, 100.0, 50.0) == 100

    def test_max_scan_finds_unanticipated_total(self):
        record = {"name": "A", "salary": 100000, "packageValue": "£150,000"}
        assert calculate_total_benefits(record, 100000.0, NAN) == 150000

    def test_sum_used_when_max_not_positive(self):
        record = {"totalBenefits": 0, "note": "none"}
        assert calculate_total_benefits(record, NAN, NAN) == 0

    def test_negative_sum_is_clamped(self):
        record = {"salary": -500, "allowances": -100}
        assert calculate_total_benefits(record, -500.0, -100.0) == 0

    def test_largest_numeric_value_without_numbers(self):
        assert math.isnan(largest_numeric_value({"name": "A"}, 10.0, 20.0))

    @pytest.mark.parametrize(
        "record",
        [
            {},
            {"totalBenefits": "n/a"},
            {"totalBenefits": float("inf")},
            {"totalBenefits": -10},
            {"salary": float("-inf")},
            {"salary": "abc", "allowances": None},
        ],
    )
    def test_result_is_always_finite_and_non_negative(self, record):
        total = calculate_total_benefits(record, NAN, NAN)
        assert math.isfinite(total)
        assert total >= 0


class TestRecordNormalizer:
    """Tests for RecordNormalizer.normalize()."""

    def test_non_mapping_is_rejected(self, normalizer):
        assert normalizer.normalize("not a record") is None
        assert normalizer.normalize(None) is None
        assert normalizer.normalize([1, 2]) is None

    def test_full_record(self, normalizer):
        record = normalizer.normalize({
            "fullName": "Grace Hopper",
            "jobTitle": "Technical Director",
            "salary": "£210,000",
            "allowances": "£15,500",
            "totalBenefits": "£240,000",
            "taxReference": "TR-1",
            "payrollNumber": "P-1",
        })

        assert record.display_name == "Grace Hopper"
        assert record.is_director is True
        assert record.role_raw == "Technical Director"
        assert record.salary == 210000
        assert record.allowances == 15500
        assert record.total_benefits == 240000
        assert record.tax_number == "TR-1"
        assert record.employee_number == "P-1"

    def test_missing_identifiers_use_placeholder(self, normalizer):
        record = normalizer.normalize({"name": "A", "role": "Director"})
        assert record.tax_number == PLACEHOLDER
        assert record.employee_number == PLACEHOLDER

    def test_missing_name_uses_role(self, normalizer):
        record = normalizer.normalize({"role": "Finance Director"})
        assert record.display_name == "Finance Director"

    def test_missing_name_and_role_uses_default(self, normalizer):
        record = normalizer.normalize({"salary": 1})
        assert record.display_name == "Director"
        assert record.role_raw == ""
        assert record.is_director is False

    def test_unparseable_amounts_are_not_available(self, normalizer):
        record = normalizer.normalize({"name": "A", "salary": "n/a"})
        assert math.isnan(record.salary)
        assert math.isnan(record.allowances)
        assert record.total_benefits == 0

    def test_case_insensitive_aliases(self, normalizer):
        record = normalizer.normalize({
            "Employee Name": "B",
            "EMPLOYMENT": "Sales Director",
            "SALARY": "50000",
            "Benefits": "5000",
        })
        assert record.display_name == "B"
        assert record.is_director is True
        assert record.salary == 50000
        assert record.allowances == 5000

    def test_numeric_identifiers_are_stringified(self, normalizer):
        record = normalizer.normalize({"name": 7, "taxId": 12345, "employeeId": 99})
        assert record.display_name == "7"
        assert record.tax_number == "12345"
        assert record.employee_number == "99"

    def test_raw_fields_are_kept(self, normalizer):
        raw = {"name": "A", "role": "Director", "department": "Finance"}
        record = normalizer.normalize(raw)
        assert record.get("department") == "Finance"
        assert record.get("displayName") == "A"

    def test_senior_director_of_engineering(self, normalizer):
        record = normalizer.normalize({"name": "A", "role": "Senior Director of Engineering"})
        assert record.is_director is True

    def test_huge_json_integer_field(self, normalizer):
        """A reference number too large for a float is skipped, not raised."""
        raw = json.loads(
            '{"name": "A", "role": "Director", "salary": 1000, "ref": %s}' % ("9" * 400)
        )

        record = normalizer.normalize(raw)

        assert record.salary == 1000
        assert record.total_benefits == 1000

    @pytest.mark.parametrize(
        "raw,expected_total",
        [
            ({"name": "A", "salary": 1000, "ref": 10**400}, 1000),
            ({"name": "A", "salary": "1" * 400, "allowances": 500}, 500),
            ({"name": "A", "salary": 2000, "allowances": "1" * 400}, 2000),
            ({"name": "A", "salary": float("inf"), "allowances": float("-inf")}, 0),
            ({"name": "A", "salary": float("-inf"), "allowances": 750}, 750),
            ({"name": "A", "totalBenefits": 10**400, "salary": 3000}, 3000),
            ({"name": "A", "totalBenefits": "1" * 400}, 0),
            ({"name": "A", "allowances": -(10**400)}, 0),
        ],
    )
    def test_out_of_range_amounts_keep_total_finite(self, normalizer, raw, expected_total):
        record = normalizer.normalize(raw)

        assert math.isfinite(record.total_benefits)
        assert record.total_benefits >= 0
        assert record.total_benefits == expected_total

    def test_infinite_salary_is_kept_on_record(self, normalizer):
        record = normalizer.normalize({"name": "A", "salary": "1" * 400})
        assert record.salary == math.inf
        assert record.total_benefits == 0

    def test_engineer_is_excluded_from_directors(self, normalizer):
        records = [
            normalizer.normalize({"name": "A", "role": "Engineer"}),
            normalizer.normalize({"name": "B", "role": "Director"}),
        ]
        assert records[0].is_director is False
        assert [r.display_name for r in filter_directors(records)] == ["B"]


class TestNormalizeBatch:
    """Tests for RecordNormalizer.normalize_batch()."""

    def test_counts_and_order(self, normalizer, mixed_payload):
        result = normalizer.normalize_batch(extract_records(mixed_payload))

        assert result.rejected_count == 1
        assert result.total_count == 4
        assert [r.display_name for r in result.records] == [
            "Grace Hopper",
            "Alan Turing",
            "Ada Lovelace",
        ]
        assert [r.display_name for r in result.directors] == ["Grace Hopper", "Ada Lovelace"]

    def test_zero_total_record_in_batch(self, normalizer, mixed_payload):
        """Ada's zero total falls through to the largest value on the record."""
        result = normalizer.normalize_batch(extract_records(mixed_payload))
        ada = result.records[2]
        assert ada.salary == 300000
        assert ada.allowances == 40000
        assert ada.total_benefits == 300000

    def test_rejections_are_logged(self, normalizer):
        normalizer.normalize_batch([None, {"name": "A"}])

        debug_events = [c.kwargs["extra"]["event"] for c in normalizer.logger.debug.call_args_list]
        assert debug_events == ["normalization.record.rejected"]

        info_call = normalizer.logger.info.call_args
        assert info_call.kwargs["extra"]["event"] == "normalization.batch.completed"
        assert info_call.kwargs["extra"]["rejected_count"] == 1
        assert info_call.kwargs["extra"]["record_count"] == 1

    def test_out_of_range_record_does_not_stop_batch(self, normalizer):
        result = normalizer.normalize_batch([
            {"name": "A", "role": "Director", "salary": 1000, "ref": 10**400},
            {"name": "B", "role": "Director", "salary": "1" * 400, "allowances": 2500},
            {"name": "C", "role": "Director", "salary": 4000},
        ])

        assert result.rejected_count == 0
        assert [r.display_name for r in result.directors] == ["A", "B", "C"]
        assert [r.total_benefits for r in result.directors] == [1000, 2500, 4000]

    def test_empty_input(self, normalizer):
        result = normalizer.normalize_batch([])
        assert result.records == []
        assert result.rejected_count == 0


class TestEndToEnd:
    """Extraction plus normalisation of a small payload."""

    def test_cash_and_expenses_payload(self, normalizer):
        payload = {
            "items": [
                {"fullName": "A", "role": "Director", "cash": "100,000", "expenses": "20,000"}
            ]
        }

        result = normalizer.normalize_batch(extract_records(payload))
        directors = result.directors

        assert len(directors) == 1
        record = directors[0]
        assert record.salary == 100000
        assert record.allowances == 20000
        # No explicit total: the largest value on the record is used
        assert record.total_benefits == 100000
