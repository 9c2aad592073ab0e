import logging
from typing import List, Optional

from biztime.core.db import QueryGateway
from biztime.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)


def list_companies(db: QueryGateway) -> List[dict]:
    return db.execute("SELECT code, name, description FROM companies")


def get_company(db: QueryGateway, code: str) -> Optional[dict]:
    """
    Company row plus the ids of its invoices, or None if the code is unknown.
    """
    rows = db.execute(
        """SELECT code, name, description
             FROM companies
            WHERE code = :code""",
        {"code": code},
    )
    if not rows:
        return None

    company = rows[0]
    invoice_rows = db.execute(
        "SELECT id FROM invoices WHERE comp_code = :code",
        {"code": code},
    )
    company["invoices"] = [r["id"] for r in invoice_rows]
    return company


# TODO: duplicate code/name still surfaces as a 500; map IntegrityError to 409
# if clients need to tell it apart from server faults.
def create_company(db: QueryGateway, payload: CompanyCreate) -> dict:
    rows = db.execute(
        """INSERT INTO companies (code, name, description)
           VALUES (:code, :name, :description)
           RETURNING code, name, description""",
        payload.model_dump(),
    )
    logger.info("Created company %s", rows[0]["code"])
    return rows[0]


def update_company(db: QueryGateway, code: str, payload: CompanyUpdate) -> Optional[dict]:
    rows = db.execute(
        """UPDATE companies
              SET name = :name,
                  description = :description
            WHERE code = :code
        RETURNING code, name, description""",
        {"name": payload.name, "description": payload.description, "code": code},
    )
    return rows[0] if rows else None


def delete_company(db: QueryGateway, code: str) -> bool:
    rows = db.execute(
        "DELETE FROM companies WHERE code = :code RETURNING code",
        {"code": code},
    )
    if rows:
        logger.info("Deleted company %s", code)
    return bool(rows)
