"""
Drops and recreates the BizTime tables, then loads sample data.

    python -m biztime.scripts.seed_db [--yes]
"""

import sys

from biztime.core.config import settings
from biztime.core.db import QueryGateway, open_gateway, reset_db

SAMPLE_COMPANIES = [
    {"code": "apple", "name": "Apple Computer", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

SAMPLE_INVOICES = [
    {"comp_code": "apple", "amt": "100", "paid": False, "paid_date": None},
    {"comp_code": "apple", "amt": "200", "paid": False, "paid_date": None},
    {"comp_code": "apple", "amt": "300", "paid": True, "paid_date": "2018-01-01"},
    {"comp_code": "ibm", "amt": "400", "paid": False, "paid_date": None},
]


def seed(db: QueryGateway):
    reset_db(db)
    for company in SAMPLE_COMPANIES:
        db.execute(
            "INSERT INTO companies (code, name, description) VALUES (:code, :name, :description)",
            company,
        )
    for invoice in SAMPLE_INVOICES:
        db.execute(
            """INSERT INTO invoices (comp_code, amt, paid, paid_date)
               VALUES (:comp_code, :amt, :paid, :paid_date)""",
            invoice,
        )
    print(f"Loaded {len(SAMPLE_COMPANIES)} companies and {len(SAMPLE_INVOICES)} invoices.")


if __name__ == "__main__":
    if "--yes" not in sys.argv:
        print(f"WARNING: this drops ALL data in {settings.DATABASE_URL}")
        confirm = input("Type 'yes' to continue: ")
        if confirm.lower() != "yes":
            print("Cancelled.")
            sys.exit(1)

    gateway = open_gateway(settings.DATABASE_URL)
    try:
        seed(gateway)
    finally:
        gateway.close()
