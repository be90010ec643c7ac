from __future__ import annotations

from datetime import date

import pytest

from src.escalaflex.escalaflex.core.enums import ShiftType
from src.escalaflex.escalaflex.core.exceptions import NotConfiguredError, StorageError, ValidationError
from src.escalaflex.escalaflex.overrides.repository import OverrideRepository
from src.escalaflex.escalaflex.overrides.service import OverrideService
from src.escalaflex.escalaflex.patterns.model import ShiftPattern
from src.escalaflex.escalaflex.patterns.repository import PatternRepository
from src.escalaflex.escalaflex.patterns.service import PatternService
from src.escalaflex.escalaflex.patterns.validation import validate_pattern
from src.escalaflex.escalaflex.storage.memory_store import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return PatternService(PatternRepository(store), OverrideRepository(store))


class TestModel:
    def test_round_trip(self):
        pattern = ShiftPattern(work_days=12, off_days=36, cycle_start=date(2024, 3, 10))
        data = pattern.to_dict()
        assert data == {"work": 12, "off": 36, "startDate": "2024-03-10"}
        assert ShiftPattern.from_dict(data) == pattern

    def test_with_counts_keeps_start(self):
        pattern = ShiftPattern(work_days=5, off_days=2, cycle_start=date(2024, 1, 1))
        new = pattern.with_counts(work_days=4, off_days=3)
        assert new == ShiftPattern(work_days=4, off_days=3, cycle_start=date(2024, 1, 1))
        assert pattern.work_days == 5


class TestValidation:
    def test_valid(self):
        assert validate_pattern(work="6", off=1, cycle_start="2024-01-01") == ShiftPattern(6, 1, date(2024, 1, 1))

    @pytest.mark.parametrize(
        "work, off, start",
        [
            (0, 2, "2024-01-01"),
            (5, 0, "2024-01-01"),
            (-1, 2, "2024-01-01"),
            (2.5, 2, "2024-01-01"),
            ("abc", 2, "2024-01-01"),
            (True, 2, "2024-01-01"),
            (5, 2, None),
            (5, 2, "01/01/2024"),
        ],
    )
    def test_invalid(self, work, off, start):
        with pytest.raises(ValidationError):
            validate_pattern(work=work, off=off, cycle_start=start)


class TestService:
    def test_uninitialized(self, service):
        assert service.get_pattern() is None
        with pytest.raises(NotConfiguredError):
            service.require_pattern()

    def test_save_persists_layout(self, service, store):
        service.save_pattern(work=5, off=2, cycle_start=date(2024, 1, 1))
        assert store.get("shiftPattern") == {"work": 5, "off": 2, "startDate": "2024-01-01"}
        assert service.get_pattern() == ShiftPattern(5, 2, date(2024, 1, 1))

    def test_invalid_save_keeps_previous(self, service):
        service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
        with pytest.raises(ValidationError):
            service.save_pattern(work=0, off=2, cycle_start="2024-01-01")
        assert service.get_pattern() == ShiftPattern(5, 2, date(2024, 1, 1))

    def test_apply_suggestion_keeps_cycle_start(self, service):
        service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
        applied = service.apply_suggestion(work=4, off=3)
        assert applied == ShiftPattern(4, 3, date(2024, 1, 1))
        assert service.get_pattern() == applied

    def test_apply_suggestion_requires_pattern(self, service):
        with pytest.raises(NotConfiguredError):
            service.apply_suggestion(work=4, off=3)

    def test_apply_invalid_suggestion(self, service):
        service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
        with pytest.raises(ValidationError):
            service.apply_suggestion(work=0, off=3)

    def test_reset_removes_everything(self, service, store):
        overrides = OverrideService(OverrideRepository(store))
        service.save_pattern(work=5, off=2, cycle_start="2024-01-01")
        overrides.set_override("2024-01-03", shift_type=ShiftType.SWAP)

        service.reset()

        assert service.get_pattern() is None
        assert overrides.snapshot() == {}

    def test_corrupt_pattern(self, service, store):
        store.set("shiftPattern", {"work": 5})
        with pytest.raises(StorageError):
            service.get_pattern()
