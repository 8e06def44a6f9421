"""Paid-date transitions exercised directly against the invoice service."""

from datetime import date

import pytest

from biztime.core.errors import NotFoundError
from biztime.schemas.invoice_schema import InvoiceUpdate
from biztime.services.invoice_service import invoice_service

TODAY = date(2024, 5, 17)


@pytest.mark.parametrize(
    "invoice_id, paid, expected",
    [
        (1, True, TODAY),               # unpaid -> paid
        (1, False, None),               # unpaid -> unpaid
        (2, True, date(2018, 2, 2)),    # paid -> paid
        (2, False, None),               # paid -> unpaid
    ],
)
def test_paid_date_transitions(session, invoice_id, paid, expected) -> None:
    row = invoice_service.update_invoice(
        session, invoice_id, InvoiceUpdate(paid=paid), today=TODAY
    )
    assert row["paid"] is paid
    assert row["paid_date"] == expected


def test_repeated_payment_is_idempotent(session) -> None:
    payload = InvoiceUpdate(amt=100, paid=True)
    first = invoice_service.update_invoice(session, 1, payload, today=TODAY)
    again = invoice_service.update_invoice(session, 1, payload, today=date(2024, 6, 1))
    assert first["paid_date"] == TODAY
    assert again["paid_date"] == TODAY


def test_pay_after_unpay_restamps(session) -> None:
    invoice_service.update_invoice(session, 2, InvoiceUpdate(paid=False), today=TODAY)
    row = invoice_service.update_invoice(session, 2, InvoiceUpdate(paid=True), today=TODAY)
    assert row["paid_date"] == TODAY


def test_update_missing_invoice_raises(session) -> None:
    with pytest.raises(NotFoundError):
        invoice_service.update_invoice(session, 42, InvoiceUpdate(paid=True))
