import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from hotel_api.api.deps import engine  # noqa: E402
from hotel_api.infrastructure.db.seed import DEMO_HOTELS, DEMO_ROOMS, seed_catalog  # noqa: E402
from hotel_api.infrastructure.db.tables import metadata  # noqa: E402


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await seed_catalog(conn)
        print(f"Seeded {len(DEMO_HOTELS)} hotels and {len(DEMO_ROOMS)} rooms.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
