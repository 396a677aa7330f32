from enum import Enum
import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, Integer, Text, Date, CheckConstraint, Index, text
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True,
                                    server_default=text("gen_random_uuid()"))
    customer_id: Mapped[str] = mapped_column(UUID(as_uuid=False), ForeignKey("customers.id"), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    customer: Mapped["Customer"] = relationship(back_populates="invoices", lazy="joined")

    __table_args__ = (
        CheckConstraint("amount > 0", name="chk_invoice_amount_pos"),
        CheckConstraint("status IN ('pending', 'paid')", name="chk_invoice_status"),
        Index("ix_invoices_customer_id", "customer_id"),
    )
