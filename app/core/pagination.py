from typing import Generic, TypeVar
from pydantic import BaseModel, computed_field
from sqlalchemy import select, func
from typing import Any
from sqlalchemy.ext.asyncio import AsyncSession


T = TypeVar("T")


class PageDTO(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    page_size: int

    @computed_field
    @property
    def pages(self) -> int:
        if self.page_size <= 0:
            return 1
        return max(1, (self.total + self.page_size - 1) // self.page_size)

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.pages


async def paginate(
        db: AsyncSession,
        base_stmt,
        *,
        page: int = 1,
        page_size: int = 20,
        where: list[Any] | None = None,
        order_by: list[Any] | None = None,
        scalars: bool = True
) -> tuple[list, int]:
    page = max(1, int(page))
    page_size = max(1, min(100, int(page_size)))

    stmt = base_stmt
    if where:
        stmt = stmt.where(*where)

    total = await db.scalar(select(func.count()).select_from(stmt.order_by(None).subquery()))

    if order_by:
        stmt = stmt.order_by(*order_by)
    stmt = stmt.limit(page_size).offset((page - 1) * page_size)

    if scalars:
        result = await db.scalars(stmt)
    else:
        result = await db.execute(stmt)

    return list(result.all()), int(total or 0)
