#!/usr/bin/env python3
"""
Seed script for local dashboards.

Creates a demo account (if missing) and a handful of sample orders owned
by it, so GET /api/orders has something to show.

Usage: python seed.py [--email demo@example.com] [--password demo1234] [--count 5]
"""

import argparse
import asyncio
import logging
import random
import sys

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig, ConfigurationError
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.domain.entities import Account, Order, normalize_email

logger = logging.getLogger("seed")

CUSTOMERS = ["Ada Lovelace", "Alan Turing", "Grace Hopper", "Edsger Dijkstra", "Barbara Liskov"]
PRODUCTS = ["Keyboard", "Monitor", "Laptop stand", "USB-C hub", "Desk lamp"]


async def seed_orders(uow, hasher: PasswordHasher, email: str, password: str, count: int) -> int:
    """Insert `count` orders for the account, creating it first if needed"""
    async with uow:
        account = await uow.accounts.get_by_email(email)
        if account is None:
            account = await uow.accounts.create(
                Account(email=normalize_email(email), password_hash=hasher.hash(password))
            )
            logger.info(f"Created demo account {account.email}")

        existing = await uow.orders.count_by_account_id(account.id)
        for offset in range(count):
            await uow.orders.create(
                Order(
                    number=1000 + existing + offset,
                    customer=random.choice(CUSTOMERS),
                    product=random.choice(PRODUCTS),
                    account_id=account.id,
                )
            )
        await uow.commit()
    return count


async def main(args) -> None:
    ApplicationConfig.validate()
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with Session() as session:
            added = await seed_orders(
                SqlAlchemyUnitOfWork(session),
                PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS),
                args.email,
                args.password,
                args.count,
            )
        logger.info(f"Seeded {added} orders for {args.email}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo orders")
    parser.add_argument("--email", default="demo@example.com")
    parser.add_argument("--password", default="demo1234")
    parser.add_argument("--count", type=int, default=5)

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL.upper())
    try:
        asyncio.run(main(parser.parse_args()))
    except ConfigurationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        sys.exit(1)
