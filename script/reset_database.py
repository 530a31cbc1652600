#!/usr/bin/env python3
"""
Database Reset Script
Drop and recreate every parking table on the configured DATABASE_URL

Notes:
- This script only resets database structure, does not seed demo data
- To seed demo data, run `python -m script.seed_data`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.database.orm_db_setting import create_db_and_tables, drop_all_tables


async def main() -> None:
    print('🔄 Starting database reset...')
    print(f'Database URL: {settings.DATABASE_URL}')
    print('=' * 50)

    database = container.database()
    try:
        print('🗑️ Dropping tables...')
        await drop_all_tables(database)

        print('🏗️ Creating tables...')
        await create_db_and_tables(database)

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1) from e
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
