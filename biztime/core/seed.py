from datetime import date

from sqlalchemy.orm import Session

from biztime.models.company_model import Company
from biztime.models.invoice_model import Invoice

SAMPLE_COMPANIES = [
    {"code": "apple", "name": "Apple", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

SAMPLE_INVOICES = [
    {"comp_code": "apple", "amt": 100, "paid": False, "add_date": date(2018, 1, 1), "paid_date": None},
    {"comp_code": "apple", "amt": 200, "paid": True, "add_date": date(2018, 2, 1), "paid_date": date(2018, 2, 2)},
    {"comp_code": "ibm", "amt": 300, "paid": False, "add_date": date(2018, 3, 1), "paid_date": None},
]


def seed_sample_data(db: Session) -> None:
    """Replace every row with the sample companies and invoices."""
    db.query(Invoice).delete()
    db.query(Company).delete()
    db.add_all(Company(**row) for row in SAMPLE_COMPANIES)
    db.flush()
    db.add_all(Invoice(**row) for row in SAMPLE_INVOICES)
    db.commit()
