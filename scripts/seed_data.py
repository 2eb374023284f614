#!/usr/bin/env python3
"""
Seed database with test data for development.
"""

import asyncio
import logging
import os
import sys
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import func, select

from repairshop.config.database import create_engine, create_session_factory
from repairshop.infrastructure.database.models import (
    CustomerModel,
    MinerModelModel,
    PartModel,
    UserModel,
    WarrantyProfileModel,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def get_seed_database_url():
    """Get database URL for seeding."""
    # Allow override for Docker environment
    return os.getenv("MIGRATION_DATABASE_URL") or os.getenv("DATABASE_URL")


STAFF = [
    ("admin", "Shop Admin", "admin"),
    ("maria", "Maria Souza", "manager"),
    ("ana", "Ana Lima", "technician"),
    ("bruno", "Bruno Costa", "technician"),
    ("front-desk", "Front Desk", "receptionist"),
]

MINER_MODELS = [
    ("Bitmain", "Antminer S19 Pro"),
    ("Bitmain", "Antminer S19j Pro"),
    ("MicroBT", "Whatsminer M30S+"),
    ("Canaan", "AvalonMiner 1246"),
]

# part_number, part_name, stock, minimum, unit price
PARTS = [
    ("PSU-APW12", "APW12 power supply", 6, 2, "120.00"),
    ("FAN-12038", "12038 cooling fan", 24, 8, "15.50"),
    ("CB-XIL", "Xilinx control board", 3, 2, "85.00"),
    ("HB-S19P", "S19 Pro hashboard", 1, 1, "410.00"),
    ("TP-GEL", "Thermal gel 100g", 10, 4, "9.90"),
]


async def seed_database():
    """Seed database with staff, customers, miner models and parts."""
    engine = create_engine(get_seed_database_url())
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            # Check if data already exists
            existing_users = await session.execute(
                select(func.count()).select_from(UserModel)
            )
            if existing_users.scalar_one() > 0:
                logger.info("Database already has data, skipping seed.")
                return

            logger.info("Creating staff accounts...")
            for username, full_name, role in STAFF:
                session.add(
                    UserModel(id=uuid4(), username=username, full_name=full_name, role=role)
                )

            logger.info("Creating customers and miner models...")
            session.add_all(
                [
                    CustomerModel(
                        full_name="Hash Farm Ltd",
                        phone="+55 11 4000-1000",
                        email="ops@hashfarm.example",
                    ),
                    CustomerModel(full_name="Joao Pereira", phone="+55 21 98888-7777"),
                ]
            )
            for brand, model_name in MINER_MODELS:
                session.add(MinerModelModel(brand=brand, model_name=model_name))
            session.add_all(
                [
                    WarrantyProfileModel(name="Standard repair", duration_days=90),
                    WarrantyProfileModel(name="Extended repair", duration_days=180),
                ]
            )

            logger.info("Creating parts inventory...")
            for part_number, part_name, stock, minimum, price in PARTS:
                session.add(
                    PartModel(
                        part_number=part_number,
                        part_name=part_name,
                        stock_qty=stock,
                        min_stock_qty=minimum,
                        unit_price=Decimal(price),
                    )
                )

            await session.commit()

        logger.info("Test data seeded successfully")
        logger.info(f"Staff: {', '.join(f'{u} ({r})' for u, _, r in STAFF)}")
        logger.info(f"Parts: {', '.join(p[0] for p in PARTS)}")

    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_database())
