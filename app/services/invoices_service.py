import logging
from datetime import datetime, timezone
from typing import Any, Mapping
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import INVOICES_PATH
from app.core.forms import FormState, field_errors
from app.core.navigation import redirect
from app.core.page_cache import revalidate_path, get_cached_page, cache_page
from app.core.pagination import PageDTO
from app.domain.invoices import crud
from app.domain.invoices.schemas import InvoiceFormDTO, InvoicesQueryDTO, InvoiceListItemDTO


logger = logging.getLogger("app.invoices")

INVOICE_FIELDS = ("customerId", "amount", "status")


def _validate(form: Mapping[str, Any]) -> InvoiceFormDTO | dict[str, list[str]]:
    try:
        dto = InvoiceFormDTO.model_validate({name: form.get(name) for name in INVOICE_FIELDS})
    except ValidationError as e:
        errors = field_errors(e)
        logger.debug("Invoice form rejected errors=%s", errors)
        return errors
    logger.debug("Invoice form accepted customer_id=%s amount=%s status=%s",
                 dto.customer_id, dto.amount, dto.status.value)
    return dto


async def create_invoice(form: Mapping[str, Any], db: AsyncSession) -> FormState:
    dto = _validate(form)
    if not isinstance(dto, InvoiceFormDTO):
        return FormState(errors=dto, message="Missing Fields. Failed to Create Invoice.")

    issued_on = datetime.now(timezone.utc).date()
    try:
        await crud.insert_invoice(
            db,
            customer_id=dto.customer_id,
            amount=dto.amount_in_cents,
            status=dto.status.value,
            issued_on=issued_on
        )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Invoice insert failed customer_id=%s", dto.customer_id)
        return FormState(message="Database Error: Failed to Create Invoice.")

    await revalidate_path(INVOICES_PATH)
    redirect(INVOICES_PATH)


async def update_invoice(invoice_id: str, form: Mapping[str, Any], db: AsyncSession) -> FormState:
    dto = _validate(form)
    if not isinstance(dto, InvoiceFormDTO):
        return FormState(errors=dto, message="Missing Fields. Failed to Update Invoice.")

    try:
        await crud.update_invoice(
            db,
            invoice_id,
            customer_id=dto.customer_id,
            amount=dto.amount_in_cents,
            status=dto.status.value
        )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Invoice update failed invoice_id=%s", invoice_id)
        return FormState(message="Database Error: Failed to Update Invoice.")

    await revalidate_path(INVOICES_PATH)
    redirect(INVOICES_PATH)


async def delete_invoice(invoice_id: str, db: AsyncSession) -> FormState:
    try:
        await crud.delete_invoice(db, invoice_id)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Invoice delete failed invoice_id=%s", invoice_id)
        return FormState(message="Database Error: Failed to Delete Invoice.")

    await revalidate_path(INVOICES_PATH)
    redirect(INVOICES_PATH)


async def list_invoices(db: AsyncSession, query: InvoicesQueryDTO) -> PageDTO[InvoiceListItemDTO]:
    cacheable = query.is_default
    if cacheable:
        cached = await get_cached_page(INVOICES_PATH)
        if cached:
            page = PageDTO[InvoiceListItemDTO].model_validate_json(cached)
            if page.page_size == query.page_size:
                return page

    rows, total = await crud.list_invoices(db, query.page, query.page_size, query=query.query)
    page = PageDTO[InvoiceListItemDTO](
        items=[InvoiceListItemDTO.model_validate(r) for r in rows],
        total=total,
        page=query.page,
        page_size=query.page_size
    )
    if cacheable:
        await cache_page(INVOICES_PATH, page.model_dump_json())
    return page
