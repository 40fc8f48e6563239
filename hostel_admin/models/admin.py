from datetime import datetime
from bson import ObjectId

# Fields an admin may change through the update endpoint
ADMIN_PROFILE_FIELDS = ("name", "email", "father_name", "contact", "address", "dob", "cnic")

def _to_object_id(value):
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None

async def get_admin_by_email(db, email):
    """Get admin by email"""
    if not email:
        return None
    return await db.admins.find_one({"email": email.lower()})

async def get_admin_by_id(db, admin_id):
    """Get admin by id"""
    admin_id = _to_object_id(admin_id)
    if admin_id is None:
        return None
    return await db.admins.find_one({"_id": admin_id})

async def get_admin_by_user(db, user_id):
    """Get the admin linked to a user, without any password field"""
    user_id = _to_object_id(user_id)
    if user_id is None:
        return None
    return await db.admins.find_one({"user": user_id}, {"password": 0})

async def create_admin(db, admin_data):
    """Create an admin linked to an existing user and hostel"""
    current_time = datetime.utcnow()
    
    admin_doc = {
        "name": admin_data["name"],
        "email": admin_data["email"].lower(),
        "father_name": admin_data["father_name"],
        "contact": admin_data["contact"],
        "address": admin_data["address"],
        "dob": admin_data["dob"],
        "cnic": admin_data["cnic"],
        "user": admin_data["user"],
        "hostel": admin_data["hostel"],
        "created_at": current_time,
        "updated_at": current_time
    }
    
    result = await db.admins.insert_one(admin_doc)
    
    return await get_admin_by_id(db, result.inserted_id)

async def update_admin(db, admin_id, update_data):
    """Overwrite admin profile fields and return the stored record"""
    admin_id = _to_object_id(admin_id)
    if admin_id is None:
        return None
    
    changes = {field: update_data[field] for field in ADMIN_PROFILE_FIELDS if field in update_data}
    if "email" in changes:
        changes["email"] = changes["email"].lower()
    changes["updated_at"] = datetime.utcnow()
    
    await db.admins.update_one({"_id": admin_id}, {"$set": changes})
    
    return await get_admin_by_id(db, admin_id)

async def delete_admin(db, admin_id):
    """Hard delete an admin"""
    admin_id = _to_object_id(admin_id)
    if admin_id is None:
        return False
    
    result = await db.admins.delete_one({"_id": admin_id})
    return result.deleted_count > 0
