"""Unit tests for expiry derivation and status transitions."""

from datetime import date

import pytest

from budgetmaster.domain.exceptions import ValidationError
from budgetmaster.domain.model.budget import Budget, BudgetStatus
from budgetmaster.domain.service.expiry_policy import (
    ExpiryPrecedence,
    derive_expiry_date,
    parse_expiry_days,
)
from budgetmaster.domain.service.status_policy import StatusPolicy

ISSUE = date(2024, 1, 1)


class TestExpiryDerivation:

    def test_adds_days(self):
        assert derive_expiry_date(ISSUE, 10) == date(2024, 1, 11)

    def test_string_days(self):
        assert derive_expiry_date(ISSUE, "30") == date(2024, 1, 31)

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.5"])
    def test_missing_or_non_numeric_uses_default(self, raw):
        assert derive_expiry_date(ISSUE, raw) == date(2024, 1, 16)

    def test_zero_days_is_same_day(self):
        assert derive_expiry_date(ISSUE, 0) == ISSUE

    def test_custom_default(self):
        assert parse_expiry_days(None, default=30) == 30

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            derive_expiry_date(ISSUE, -1)

    def test_crosses_month_boundary(self):
        assert derive_expiry_date(date(2024, 2, 20), 15) == date(2024, 3, 6)


class TestExpiryPrecedence:

    def test_explicit_first_prefers_explicit(self):
        explicit = date(2024, 6, 30)
        assert ExpiryPrecedence.EXPLICIT_FIRST.resolve(ISSUE, explicit, 10) == explicit

    def test_explicit_first_derives_without_explicit(self):
        assert ExpiryPrecedence.EXPLICIT_FIRST.resolve(ISSUE, None, 10) == date(2024, 1, 11)

    def test_derived_first_prefers_days(self):
        resolved = ExpiryPrecedence.DERIVED_FIRST.resolve(ISSUE, date(2024, 6, 30), 10)
        assert resolved == date(2024, 1, 11)

    def test_derived_first_falls_back_to_explicit(self):
        explicit = date(2024, 6, 30)
        assert ExpiryPrecedence.DERIVED_FIRST.resolve(ISSUE, explicit, None) == explicit

    def test_neither_uses_default_window(self):
        assert ExpiryPrecedence.EXPLICIT_FIRST.resolve(ISSUE, None, None) == date(2024, 1, 16)


def _budget(status: BudgetStatus) -> Budget:
    budget = Budget.create("ACME", ISSUE, date(2024, 1, 16), [])
    budget.status = status
    return budget


class TestStatusPolicy:

    @pytest.mark.parametrize("start", list(BudgetStatus))
    @pytest.mark.parametrize("target", list(BudgetStatus))
    def test_unrestricted_allows_everything(self, start, target):
        budget = _budget(start)
        StatusPolicy.UNRESTRICTED.apply(budget, target)
        assert budget.status == target

    @pytest.mark.parametrize("target", [BudgetStatus.APPROVED, BudgetStatus.REJECTED])
    def test_pending_only_allows_leaving_pending(self, target):
        budget = _budget(BudgetStatus.PENDING)
        StatusPolicy.PENDING_ONLY.apply(budget, target)
        assert budget.status == target

    def test_pending_only_blocks_reopening(self):
        budget = _budget(BudgetStatus.APPROVED)
        with pytest.raises(ValidationError, match="Cannot change status"):
            StatusPolicy.PENDING_ONLY.apply(budget, BudgetStatus.PENDING)

    def test_pending_only_allows_same_state(self):
        budget = _budget(BudgetStatus.REJECTED)
        StatusPolicy.PENDING_ONLY.apply(budget, BudgetStatus.REJECTED)
        assert budget.status == BudgetStatus.REJECTED
