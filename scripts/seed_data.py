#!/usr/bin/env python3
"""
Seed script: default accounts plus the reference catalog (factions, unit types, sample miniatures).
Writes straight to the database because admin accounts cannot be created through the API.
Existing rows (same username or name) are left alone, so it is safe to run repeatedly.
  python scripts/seed_data.py
  python scripts/seed_data.py --create-tables --admin-password s3cret-admin
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from minitracker.core.security import hash_password
from minitracker.db.base import Base
from minitracker.db.models import Miniature, User
from minitracker.db.repositories.catalog_repository import FactionRepository, UnitTypeRepository
from minitracker.db.repositories.user_repository import UserRepository
from minitracker.db.session import async_session_maker, engine

logger = logging.getLogger("seed")

FACTIONS = [
    ("Space Marines", "The Angels of Death, superhuman warriors of the Imperium"),
    ("Chaos Space Marines", "Traitorous Space Marines who serve the Chaos Gods"),
    ("Orks", "Brutal and warlike green-skinned aliens"),
    ("Tyranids", "Extra-galactic hive mind organism"),
    ("Aeldari", "Ancient and advanced alien race"),
    ("T'au Empire", "Technologically advanced alien civilization"),
    ("Necrons", "Ancient robotic race awakening from eons of slumber"),
    ("Imperial Guard", "Vast armies of humanity's soldiers"),
    ("Adeptus Mechanicus", "Tech-priests of Mars"),
    ("Genestealer Cults", "Insidious alien-hybrid cults"),
]

UNIT_TYPES = [
    ("HQ", "Headquarters units - leaders and commanders"),
    ("Troops", "Core infantry units"),
    ("Elites", "Specialized veteran units"),
    ("Fast Attack", "Fast-moving units"),
    ("Heavy Support", "Heavy weapons and vehicles"),
    ("Flyer", "Aircraft and flying units"),
    ("Dedicated Transport", "Vehicles for transporting units"),
    ("Fortification", "Defensive structures"),
    ("Lord of War", "Super-heavy units"),
]

# (name, faction, unit type, points, base size, description)
MINIATURES = [
    ("Space Marine Intercessors", "Space Marines", "Troops", 100, "32mm", "Standard Primaris infantry"),
    ("Space Marine Captain", "Space Marines", "HQ", 80, "40mm", "Commander of Space Marine forces"),
    ("Ork Boyz", "Orks", "Troops", 90, "32mm", "Basic Ork infantry mob"),
    ("Tyranid Termagants", "Tyranids", "Troops", 60, "28mm", "Basic Tyranid organisms"),
    ("Imperial Guard Infantry Squad", "Imperial Guard", "Troops", 65, "25mm", "Standard human soldiers"),
]


async def seed_user(repo: UserRepository, username: str, email: str, password: str, is_admin: bool) -> None:
    if await repo.username_exists(username):
        logger.info("User %s already exists", username)
        return
    await repo.add(
        User(username=username, email=email, password_hash=hash_password(password), is_admin=is_admin)
    )
    logger.info("Created %s %s", "admin" if is_admin else "user", username)


async def seed_catalog(repo, rows) -> dict[str, int]:
    """Insert missing names; returns name -> id for every row."""
    ids = {}
    for name, description in rows:
        row = await repo.get_by_name(name)
        if row is None:
            row = await repo.add(repo.model(name=name, description=description))
        ids[name] = row.id
    return ids


async def seed(args) -> None:
    if args.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        users = UserRepository(session)
        await seed_user(users, args.admin_username, args.admin_email, args.admin_password, True)
        await seed_user(users, args.test_username, args.test_email, args.test_password, False)

        faction_ids = await seed_catalog(FactionRepository(session), FACTIONS)
        unit_type_ids = await seed_catalog(UnitTypeRepository(session), UNIT_TYPES)
        logger.info("Catalog: %d factions, %d unit types", len(faction_ids), len(unit_type_ids))

        created = 0
        for name, faction, unit_type, points, base_size, description in MINIATURES:
            exists = await session.scalar(select(Miniature.id).where(Miniature.name == name))
            if exists is not None:
                continue
            session.add(
                Miniature(
                    name=name,
                    faction_id=faction_ids[faction],
                    unit_type_id=unit_type_ids[unit_type],
                    points_value=points,
                    base_size=base_size,
                    description=description,
                )
            )
            created += 1
        await session.commit()
        logger.info("Sample miniatures created: %d", created)

    await engine.dispose()


def main():
    ap = argparse.ArgumentParser(description="Seed default users and the reference catalog")
    ap.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    ap.add_argument("--admin-username", default="admin")
    ap.add_argument("--admin-email", default="admin@localhost.localdomain")
    ap.add_argument("--admin-password", default="admin12345")
    ap.add_argument("--test-username", default="testuser")
    ap.add_argument("--test-email", default="test@localhost.localdomain")
    ap.add_argument("--test-password", default="test12345")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    asyncio.run(seed(args))
    print(f"\nDone. Admin login: {args.admin_username} / {args.admin_password}")


if __name__ == "__main__":
    main()
