from datetime import datetime
from bson import ObjectId

async def get_user_by_email(db, email):
    """Get user by email"""
    if not email:
        return None
    return await db.users.find_one({"email": email.lower()})

async def get_user_by_id(db, user_id):
    """Get user by id"""
    if not user_id:
        return None
    
    if isinstance(user_id, str):
        if not ObjectId.is_valid(user_id):
            return None
        user_id = ObjectId(user_id)
    return await db.users.find_one({"_id": user_id})

async def create_user(db, user_data):
    """Create a new user; the password must already be hashed"""
    current_time = datetime.utcnow()
    
    user_doc = {
        "email": user_data["email"].lower(),
        "password": user_data["password"],
        "isAdmin": user_data.get("isAdmin", False),
        "created_at": current_time,
        "updated_at": current_time
    }
    
    result = await db.users.insert_one(user_doc)
    
    return await get_user_by_id(db, result.inserted_id)

async def delete_user(db, user_id):
    """Hard delete a user"""
    if not user_id:
        return False
    
    if isinstance(user_id, str):
        if not ObjectId.is_valid(user_id):
            return False
        user_id = ObjectId(user_id)
    
    result = await db.users.delete_one({"_id": user_id})
    return result.deleted_count > 0
