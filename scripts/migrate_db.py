import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from hotel_api.api.deps import engine  # noqa: E402
from hotel_api.infrastructure.db.tables import metadata  # noqa: E402


async def migrate():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print(f"Created tables: {', '.join(metadata.tables)}")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(migrate())
