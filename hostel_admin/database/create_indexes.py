import asyncio
import logging
from pymongo import IndexModel, ASCENDING

from hostel_admin.database.mongo_connection import get_database, close_mongo_connection

logger = logging.getLogger(__name__)

async def create_indexes(db=None):
    """Create database indexes"""
    if db is None:
        db = await get_database()
    
    # User collection indexes
    user_indexes = [
        IndexModel([("email", ASCENDING)], unique=True),
        IndexModel([("isAdmin", ASCENDING)])
    ]
    
    try:
        await db.users.create_indexes(user_indexes)
        logger.info("User indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating user indexes: {e}")
    
    # Admin collection indexes
    admin_indexes = [
        IndexModel([("email", ASCENDING)], unique=True),
        IndexModel([("user", ASCENDING)], unique=True),
        IndexModel([("hostel", ASCENDING)])
    ]
    
    try:
        await db.admins.create_indexes(admin_indexes)
        logger.info("Admin indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating admin indexes: {e}")
    
    try:
        await db.hostels.create_indexes([IndexModel([("name", ASCENDING)], unique=True)])
        logger.info("Hostel indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating hostel indexes: {e}")

async def _main():
    try:
        await create_indexes()
    finally:
        await close_mongo_connection()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
