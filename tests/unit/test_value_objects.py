"""
Unit tests for value objects.
"""

import dataclasses

import pytest

from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.domain.value_objects.job_number import JobNumber
from repairshop.domain.value_objects.job_priority import JobPriority
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.domain.value_objects.role import Role


class TestJobStatus:
    """Test JobStatus value object."""

    def test_enum_values(self):
        """Test that all expected enum values exist."""
        expected_values = [
            "RECEIVED",
            "DIAGNOSED",
            "WAITING_APPROVAL",
            "IN_REPAIR",
            "WAITING_PARTS",
            "TESTING",
            "READY_FOR_PICKUP",
            "COMPLETED",
            "CANCELLED",
            "ON_HOLD",
        ]
        actual_values = [status.value for status in JobStatus]
        assert actual_values == expected_values

    def test_is_closed(self):
        """Only completed and cancelled jobs are closed."""
        assert JobStatus.COMPLETED.is_closed() is True
        assert JobStatus.CANCELLED.is_closed() is True

        assert JobStatus.RECEIVED.is_closed() is False
        assert JobStatus.ON_HOLD.is_closed() is False
        assert JobStatus.READY_FOR_PICKUP.is_closed() is False

    def test_string_value_lookup(self):
        assert JobStatus("IN_REPAIR") is JobStatus.IN_REPAIR
        with pytest.raises(ValueError):
            JobStatus("in_repair")


class TestJobPriority:
    """Test JobPriority value object."""

    def test_values(self):
        assert JobPriority.NORMAL == 0
        assert JobPriority.URGENT == 1
        assert JobPriority.CRITICAL == 2

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            JobPriority(3)


class TestRoleAndAction:
    def test_roles(self):
        assert {role.value for role in Role} == {
            "admin",
            "manager",
            "technician",
            "receptionist",
        }

    def test_activity_actions_are_strings(self):
        assert ActivityAction.ADD_PART == "ADD_PART"
        assert ActivityAction("REMOVE_PART") is ActivityAction.REMOVE_PART


class TestJobNumber:
    """Test JobNumber value object."""

    def test_format_pads_sequence(self):
        """Test that the sequence is zero padded to the configured width."""
        assert str(JobNumber("RJ", 2025, 1)) == "RJ2025-0001"
        assert str(JobNumber("RJ", 2025, 42)) == "RJ2025-0042"

    def test_format_grows_past_width(self):
        """Sequences past 9999 widen instead of wrapping."""
        assert str(JobNumber("RJ", 2025, 10000)) == "RJ2025-10000"

    def test_parse(self):
        number = JobNumber.parse("RJ2024-0137")

        assert number.prefix == "RJ"
        assert number.year == 2024
        assert number.sequence == 137
        assert str(number) == "RJ2024-0137"

    def test_parse_custom_prefix(self):
        number = JobNumber.parse("WS2026-0005", prefix="WS")

        assert number.year == 2026
        assert number.sequence == 5

    @pytest.mark.parametrize(
        "value", ["", "RJ2025", "RJ25-0001", "XX2025-0001", "RJ2025-00a1", None]
    )
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            JobNumber.parse(value)

    def test_sequence_starts_at_one(self):
        with pytest.raises(ValueError, match="starts at 1"):
            JobNumber("RJ", 2025, 0)

    def test_prefix_required(self):
        with pytest.raises(ValueError, match="prefix"):
            JobNumber("", 2025, 1)

    def test_year_prefix(self):
        assert JobNumber.year_prefix("RJ", 2025) == "RJ2025-"

    def test_job_number_immutability(self):
        """Test that JobNumber is immutable."""
        number = JobNumber("RJ", 2025, 1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            number.sequence = 2
