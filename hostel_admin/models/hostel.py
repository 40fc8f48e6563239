from datetime import datetime
from bson import ObjectId

async def get_hostel_by_name(db, name):
    """Get hostel by its exact name"""
    if not name:
        return None
    return await db.hostels.find_one({"name": name})

async def get_hostel_by_id(db, hostel_id):
    """Get hostel by id"""
    if not hostel_id:
        return None
    
    if isinstance(hostel_id, str):
        if not ObjectId.is_valid(hostel_id):
            return None
        hostel_id = ObjectId(hostel_id)
    return await db.hostels.find_one({"_id": hostel_id})

async def create_hostel(db, hostel_data):
    """Create a hostel record; any extra fields are stored as given"""
    hostel_doc = dict(hostel_data)
    hostel_doc.setdefault("created_at", datetime.utcnow())
    
    result = await db.hostels.insert_one(hostel_doc)
    return await get_hostel_by_id(db, result.inserted_id)
