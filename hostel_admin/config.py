import os
from dotenv import load_dotenv
from functools import lru_cache

# Load environment variables
load_dotenv()

@lru_cache()
def get_settings():
    """Get application settings"""
    return {
        # API settings
        "API_PREFIX": os.getenv("API_PREFIX", "/api"),
        "PROJECT_NAME": "Hostel Admin API",
        "VERSION": "1.0.0",
        
        # Security settings
        "SECRET_KEY": os.getenv("SECRET_KEY", "your-super-secret-key-change-in-production"),
        "ALGORITHM": "HS256",
        "ACCESS_TOKEN_EXPIRE_MINUTES": int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        "BCRYPT_ROUNDS": int(os.getenv("BCRYPT_ROUNDS", "10")),
        
        # MongoDB settings
        "MONGODB_URI": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        "MONGO_DB_NAME": os.getenv("MONGO_DB_NAME", "hostel-management"),
        "MONGODB_MAX_CONNECTIONS": int(os.getenv("MONGODB_MAX_CONNECTIONS", "50")),
        "MONGODB_MIN_CONNECTIONS": int(os.getenv("MONGODB_MIN_CONNECTIONS", "10")),
        
        # Environment
        "ENVIRONMENT": os.getenv("ENVIRONMENT", "development"),
        "DEBUG": os.getenv("DEBUG", "True").lower() == "true"
    }
