from datetime import date
from sqlalchemy import select, insert, update, delete, or_, cast, Text
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.pagination import paginate
from app.domain.customers.models import Customer
from .models import Invoice


async def insert_invoice(
        db: AsyncSession,
        *,
        customer_id: str,
        amount: int,
        status: str,
        issued_on: date
) -> None:
    await db.execute(
        insert(Invoice).values(customer_id=customer_id, amount=amount, status=status, date=issued_on)
    )


async def update_invoice(
        db: AsyncSession,
        invoice_id: str,
        *,
        customer_id: str,
        amount: int,
        status: str
) -> None:
    await db.execute(
        update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(customer_id=customer_id, amount=amount, status=status)
    )


async def delete_invoice(db: AsyncSession, invoice_id: str) -> None:
    await db.execute(delete(Invoice).where(Invoice.id == invoice_id))


async def list_invoices(
        db: AsyncSession,
        page: int,
        page_size: int,
        *,
        query: str | None = None
) -> tuple[list, int]:
    stmt = (
        select(
            Invoice.id,
            Invoice.customer_id,
            Invoice.amount,
            Invoice.status,
            Invoice.date,
            Customer.name,
            Customer.email,
            Customer.image_url
        )
        .select_from(Invoice)
        .join(Customer, Customer.id == Invoice.customer_id)
    )
    where = []
    if query:
        like = f"%{query}%"
        where.append(or_(
            Customer.name.ilike(like),
            Customer.email.ilike(like),
            Invoice.status.ilike(like),
            cast(Invoice.amount, Text).ilike(like),
            cast(Invoice.date, Text).ilike(like),
        ))

    return await paginate(
        db,
        base_stmt=stmt,
        page=page,
        page_size=page_size,
        where=where,
        order_by=[Invoice.date.desc(), Invoice.id],
        scalars=False
    )
