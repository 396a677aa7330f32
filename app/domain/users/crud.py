from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, exists, insert
from .models import User


async def get_user_by_email(email: str, db: AsyncSession) -> User | None:
    stmt = select(User).where(User.email == email)
    result = await db.execute(stmt)
    return result.scalars().first()


async def get_user_by_id(user_id: str, db: AsyncSession) -> User | None:
    stmt = select(User).where(User.id == user_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def email_exists(email: str, db: AsyncSession) -> bool:
    stmt = select(exists().where(User.email == email))
    return bool(await db.scalar(stmt))


async def insert_user(db: AsyncSession, *, name: str, email: str, password_hash: str) -> None:
    await db.execute(
        insert(User).values(name=name, email=email, password=password_hash)
    )
