from bson import ObjectId
from datetime import datetime
from typing import Any, Dict

def serialize_mongo_object(obj: Any) -> Any:
    """Convert MongoDB objects to JSON-serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: serialize_mongo_object(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [serialize_mongo_object(item) for item in obj]
    else:
        return obj

def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize a stored record for API response, dropping the password"""
    if document is None:
        return None
    
    # Copy so the caller's document is left untouched
    serialized = document.copy()
    
    if "_id" in serialized:
        serialized["id"] = str(serialized["_id"])
        del serialized["_id"]
    
    serialized.pop("password", None)
    
    return serialize_mongo_object(serialized)

def create_success_response(**payload: Any) -> Dict[str, Any]:
    """Create a standardized success response"""
    return {"success": True, **payload}

def create_error_response(message: str, errors: Any = None) -> Dict[str, Any]:
    """Create a standardized error response"""
    return {
        "success": False,
        "message": message,
        "errors": errors if errors is not None else [{"msg": message}]
    }
