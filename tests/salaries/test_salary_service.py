from __future__ import annotations

from datetime import datetime, timezone

import pytest

from worksync.core.exceptions import AuthorizationError, ConflictError, ValidationError
from worksync.salaries.service import SalaryService


def _svc(salaries_repo, fixed_now):
    return SalaryService(salaries_repo, clock=lambda: fixed_now)


def test_create_records_payment_with_input_date(salaries_repo, fixed_now):
    salary = _svc(salaries_repo, fixed_now).create(
        {"uid": "e1", "amount": 1200, "month": "March", "year": "2026", "transactionId": "pi_1"}
    )

    assert salary.id == 1
    assert (salary.month, salary.year) == (3, 2026)
    assert salary.input_date == fixed_now
    assert salary.transaction_id == "pi_1"


def test_second_payment_for_same_month_conflicts(salaries_repo, fixed_now):
    svc = _svc(salaries_repo, fixed_now)
    svc.create({"uid": "e1", "amount": 1200, "month": 3, "year": 2026})

    with pytest.raises(ConflictError):
        svc.create({"uid": "e1", "amount": 1200, "month": "mar", "year": 2026})


@pytest.mark.parametrize(
    "payload",
    [
        {"amount": 10, "month": 1, "year": 2026},
        {"uid": "e1", "amount": 0, "month": 1, "year": 2026},
        {"uid": "e1", "amount": 10, "month": 13, "year": 2026},
        {"uid": "e1", "amount": 10, "month": "Smarch", "year": 2026},
        {"uid": "e1", "amount": 10, "month": 1, "year": "next"},
    ],
)
def test_create_validates_payload(salaries_repo, fixed_now, payload):
    with pytest.raises(ValidationError):
        _svc(salaries_repo, fixed_now).create(payload)


def test_is_paid_reflects_existing_record(salaries_repo, fixed_now):
    svc = _svc(salaries_repo, fixed_now)
    svc.create({"uid": "e1", "amount": 500, "month": 2, "year": 2026})

    assert svc.is_paid({"uid": "e1", "month": "February", "year": 2026}) is True
    assert svc.is_paid({"uid": "e1", "month": 3, "year": 2026}) is False
    assert svc.is_paid({"uid": "e2", "month": 2, "year": 2026}) is False


def test_history_is_ordered_by_payment_date(salaries_repo, fixed_now):
    svc = _svc(salaries_repo, fixed_now)
    svc.create({"uid": "e1", "amount": 300, "month": 3, "year": 2026, "inputDate": "2026-04-01T10:00:00Z"})
    svc.create({"uid": "e1", "amount": 100, "month": 1, "year": 2026, "inputDate": "2026-02-01T10:00:00Z"})
    svc.create({"uid": "e1", "amount": 200, "month": 2, "year": 2026, "inputDate": "2026-03-01T10:00:00"})

    rows = svc.history(caller_uid="e1", uid="e1")

    assert [r.amount for r in rows] == [100, 200, 300]
    assert rows[1].input_date == datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)


def test_history_for_other_uid_is_forbidden(salaries_repo, fixed_now):
    with pytest.raises(AuthorizationError):
        _svc(salaries_repo, fixed_now).history(caller_uid="e1", uid="e2")
