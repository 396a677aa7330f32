from typing import Annotated, Any, Mapping
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.dependencies.auth import get_current_user
from app.core.forms import FormState, read_form
from app.core.pagination import PageDTO
from app.domain.invoices.schemas import InvoicesQueryDTO, InvoiceListItemDTO
from app.services import invoices_service


router = APIRouter(
    prefix="/dashboard/invoices",
    tags=["invoices"],
    dependencies=[Depends(get_current_user)]
)
db_dependency = Annotated[AsyncSession, Depends(get_db)]
form_dependency = Annotated[Mapping[str, Any], Depends(read_form)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PageDTO[InvoiceListItemDTO]
)
async def list_invoices(db: db_dependency, query: Annotated[InvoicesQueryDTO, Depends()]):
    return await invoices_service.list_invoices(db, query)


@router.post("/create", response_model=FormState)
async def create_invoice(db: db_dependency, form: form_dependency):
    return await invoices_service.create_invoice(form, db)


@router.post("/{invoice_id}/edit", response_model=FormState)
async def update_invoice(invoice_id: str, db: db_dependency, form: form_dependency):
    return await invoices_service.update_invoice(invoice_id, form, db)


@router.post("/{invoice_id}/delete", response_model=FormState)
async def delete_invoice(invoice_id: str, db: db_dependency):
    return await invoices_service.delete_invoice(invoice_id, db)
