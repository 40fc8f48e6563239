from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConnectionFailure
import logging
from typing import Optional
from hostel_admin.config import get_settings

logger = logging.getLogger(__name__)

class MongoDB:
    """MongoDB connection holder"""
    client: Optional[AsyncIOMotorClient] = None
    database = None

mongodb = MongoDB()

async def connect_to_mongo():
    """Create database connection"""
    try:
        settings = get_settings()
        
        mongodb.client = AsyncIOMotorClient(
            settings["MONGODB_URI"],
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            maxPoolSize=settings["MONGODB_MAX_CONNECTIONS"],
            minPoolSize=settings["MONGODB_MIN_CONNECTIONS"]
        )
        
        # Fail fast if the server is unreachable
        await mongodb.client.admin.command('ping')
        
        mongodb.database = mongodb.client[settings["MONGO_DB_NAME"]]
        
        logger.info(f"Successfully connected to MongoDB: {settings['MONGO_DB_NAME']}")
        
    except ConnectionFailure as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise e
    except Exception as e:
        logger.error(f"Unexpected error connecting to MongoDB: {e}")
        raise e

async def close_mongo_connection():
    """Close database connection"""
    if mongodb.client is not None:
        mongodb.client.close()
        mongodb.client = None
        mongodb.database = None
        logger.info("MongoDB connection closed")

async def get_database():
    """Get database instance, connecting lazily on first use"""
    if mongodb.database is None:
        await connect_to_mongo()
    return mongodb.database

async def ping_database():
    """Check if database is accessible"""
    try:
        if mongodb.client is not None:
            await mongodb.client.admin.command('ping')
            return True
        return False
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        return False

class MongoConnectionManager:
    """Thin object wrapper used by the health endpoint"""
    
    async def health_check(self):
        """Database health check"""
        try:
            if await ping_database():
                return {
                    "status": "healthy",
                    "database_name": mongodb.database.name if mongodb.database is not None else "unknown"
                }
            else:
                return {"status": "unhealthy", "error": "Database ping failed"}
        except Exception as e:
            return {"status": "unhealthy", "error": str(e)}
