from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    text,
)
from sqlalchemy.sql import expression
from biztime.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amt > 0", name="invoices_amt_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )

    amt = Column(Numeric(10, 2), nullable=False)

    # --- Payment state (never flipped by the API) ---
    paid = Column(Boolean, nullable=False, server_default=expression.false())
    add_date = Column(Date, nullable=False, server_default=text("CURRENT_DATE"))
    paid_date = Column(Date, nullable=True)
