import logging
from typing import List, Optional

from biztime.core.db import QueryGateway
from biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

INVOICE_COLUMNS = "id, comp_code, amt, paid, add_date, paid_date"


def _amt_param(amt) -> Optional[str]:
    # Decimal is not a SQLite bind type; both backends accept the text form
    return None if amt is None else str(amt)


class InvoiceService:
    """
    Thin data-access layer for invoices.

    Every method is one statement against the gateway, except get_invoice,
    which reads the owning company with a second query.
    """

    # ------------------------------------------------------------
    # Fetch all invoices (id + company code only)
    # ------------------------------------------------------------
    def get_all_invoices(self, db: QueryGateway) -> List[dict]:
        return db.execute("SELECT id, comp_code FROM invoices")

    # ------------------------------------------------------------
    # Fetch single invoice by ID, with its company attached
    # ------------------------------------------------------------
    def get_invoice(self, db: QueryGateway, invoice_id: int) -> Optional[dict]:
        rows = db.execute(
            f"SELECT {INVOICE_COLUMNS} FROM invoices WHERE id = :id",
            {"id": invoice_id},
        )
        if not rows:
            return None

        invoice = rows[0]
        comp_code = invoice.pop("comp_code")

        # Not atomic with the read above; a company deleted in between comes back as None
        company_rows = db.execute(
            """SELECT code, name, description
                 FROM companies
                WHERE code = :code""",
            {"code": comp_code},
        )
        invoice["company"] = company_rows[0] if company_rows else None
        return invoice

    # ------------------------------------------------------------
    # Create (paid / add_date come from column defaults)
    # ------------------------------------------------------------
    def create_invoice(self, db: QueryGateway, payload: InvoiceCreate) -> dict:
        rows = db.execute(
            f"""INSERT INTO invoices (comp_code, amt)
                VALUES (:comp_code, :amt)
                RETURNING {INVOICE_COLUMNS}""",
            {"comp_code": payload.comp_code, "amt": _amt_param(payload.amt)},
        )
        logger.info("Created invoice %s for %s", rows[0]["id"], payload.comp_code)
        return rows[0]

    # ------------------------------------------------------------
    # Update amount only
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: QueryGateway,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Optional[dict]:
        rows = db.execute(
            f"""UPDATE invoices
                   SET amt = :amt
                 WHERE id = :id
             RETURNING {INVOICE_COLUMNS}""",
            {"amt": _amt_param(payload.amt), "id": invoice_id},
        )
        return rows[0] if rows else None

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: QueryGateway, invoice_id: int) -> bool:
        rows = db.execute(
            "DELETE FROM invoices WHERE id = :id RETURNING id",
            {"id": invoice_id},
        )
        if rows:
            logger.info("Deleted invoice %s", invoice_id)
        return bool(rows)


invoice_service = InvoiceService()
