import asyncio
import logging
from anyio import to_thread
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import SEED_USER_EMAIL, SEED_USER_PASSWORD
from app.core.database import AsyncSessionLocal
from app.core.security import hash_password
from app.domain.customers.models import Customer
from app.domain.users.crud import get_user_by_email
from app.domain.users.models import User


logger = logging.getLogger("app.seed")

DEMO_CUSTOMERS = (
    {"name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
    {"name": "Michael Novotny", "email": "michael@novotny.com", "image_url": "/customers/michael-novotny.png"},
    {"name": "Amy Burns", "email": "amy@burns.com", "image_url": "/customers/amy-burns.png"},
    {"name": "Balazs Orban", "email": "balazs@orban.com", "image_url": "/customers/balazs-orban.png"},
)


async def seed_user(db: AsyncSession) -> User | None:
    if not SEED_USER_PASSWORD or not SEED_USER_EMAIL:
        logger.warning("Missing seed user email or password - skipping user seed")
        return None

    email = SEED_USER_EMAIL.strip().lower()
    user = await get_user_by_email(email, db)
    if user:
        return user

    user = User(
        name="Dashboard User",
        email=email,
        password=await to_thread.run_sync(hash_password, SEED_USER_PASSWORD)
    )
    db.add(user)
    await db.flush()
    return user


async def seed_customers(db: AsyncSession) -> int:
    existing = set((await db.scalars(select(Customer.email))).all())
    added = 0
    for data in DEMO_CUSTOMERS:
        if data["email"] in existing:
            continue
        db.add(Customer(**data))
        added += 1
    await db.flush()
    return added


async def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    async with AsyncSessionLocal() as db:
        user = await seed_user(db)
        added = await seed_customers(db)
        await db.commit()
        if user:
            logger.info("Seed user OK: %s", user.email)
        logger.info("Seeded %d customers", added)


if __name__ == "__main__":
    asyncio.run(main())
