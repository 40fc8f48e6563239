import logging

from pymongo.errors import DuplicateKeyError

from hostel_admin.core.exceptions import (
    APIException, AuthError, ConflictError, InternalError, NotFoundError, ValidationError
)
from hostel_admin.core.security import generate_token, get_password_hash, verify_token
from hostel_admin.models.admin import (
    create_admin, delete_admin, get_admin_by_email, get_admin_by_id,
    get_admin_by_user, update_admin
)
from hostel_admin.models.hostel import get_hostel_by_id, get_hostel_by_name
from hostel_admin.models.user import create_user, delete_user, get_user_by_email
from hostel_admin.utils.helpers import create_success_response, serialize_document
from hostel_admin.utils.validators import missing_fields, validate_email

logger = logging.getLogger(__name__)

REGISTRATION_FIELDS = (
    "name", "email", "father_name", "contact", "address", "dob", "cnic", "hostel", "password"
)


async def register_admin_service(db, admin_data: dict):
    """
    Register a new hostel admin

    Creates the login user (flagged as admin) and the admin profile linked to
    the named hostel, then issues a token for the new user. The user is
    removed again if the admin record cannot be created.

    Returns:
        dict: ``{success, token, admin}``

    Raises:
        ValidationError: a field is missing or the email is malformed
        ConflictError: an admin or user with this email already exists
        NotFoundError: the named hostel does not exist
        InternalError: the user or admin record could not be created
    """
    user = None
    try:
        missing = missing_fields(admin_data, REGISTRATION_FIELDS)
        if missing:
            logger.warning(f"Admin registration missing fields: {', '.join(missing)}")
            raise ValidationError(
                "All fields are required",
                errors=[{"msg": "Field is required", "field": field} for field in missing]
            )

        email = admin_data["email"].strip().lower()
        if not validate_email(email):
            raise ValidationError("Invalid email format")

        if await get_admin_by_email(db, email):
            logger.warning(f"Admin registration with existing email: {email}")
            raise ConflictError("Admin already exists")

        hostel = await get_hostel_by_name(db, admin_data["hostel"])
        if not hostel:
            raise NotFoundError("Hostel not found")

        if await get_user_by_email(db, email):
            logger.warning(f"Admin registration for existing user account: {email}")
            raise ConflictError("User already exists")

        user = await create_user(db, {
            "email": email,
            "password": get_password_hash(admin_data["password"]),
            "isAdmin": True
        })
        if not user:
            raise InternalError("User not created")

        admin = await create_admin(db, {
            "name": admin_data["name"],
            "email": email,
            "father_name": admin_data["father_name"],
            "contact": admin_data["contact"],
            "address": admin_data["address"],
            "dob": admin_data["dob"],
            "cnic": admin_data["cnic"],
            "user": user["_id"],
            "hostel": hostel["_id"]
        })
        if not admin:
            await _discard_user(db, user)
            raise InternalError("Admin not created")

        token = generate_token(user["_id"], user["isAdmin"])

        logger.info(f"Admin registered: {email} (hostel: {hostel['name']})")

        return create_success_response(token=token, admin=serialize_document(admin))

    except APIException:
        raise
    except DuplicateKeyError as e:
        # Lost a race with a concurrent registration for the same email
        logger.warning(f"Admin registration duplicate key: {str(e)}")
        await _discard_user(db, user)
        raise ConflictError("Admin already exists")
    except Exception as e:
        logger.error(f"Admin registration error: {str(e)}")
        await _discard_user(db, user)
        raise InternalError("Server error")


async def _discard_user(db, user):
    """Remove a user created by a registration that did not complete"""
    if not user:
        return
    try:
        await delete_user(db, user["_id"])
    except Exception as e:
        logger.error(f"Failed to remove user {user['_id']} after failed registration: {str(e)}")


async def update_admin_service(db, admin_data: dict):
    """Overwrite the profile of the admin matching ``admin_data['email']``"""
    try:
        admin = await get_admin_by_email(db, admin_data["email"])
        if not admin:
            raise NotFoundError("Admin does not exist")

        updated_admin = await update_admin(db, admin["_id"], admin_data)
        if not updated_admin:
            raise InternalError("Admin not updated")

        logger.info(f"Admin updated: {updated_admin['email']}")

        return create_success_response(admin=serialize_document(updated_admin))

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Admin update error: {str(e)}")
        raise InternalError("Server error")


async def get_admin_hostel_service(db, admin_id: str):
    """Return the hostel referenced by the given admin"""
    try:
        admin = await get_admin_by_id(db, admin_id)
        if not admin:
            raise NotFoundError("Admin does not exist")

        hostel = await get_hostel_by_id(db, admin.get("hostel"))

        return create_success_response(hostel=serialize_document(hostel))

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Admin hostel lookup error: {str(e)}")
        raise InternalError("Server error")


async def get_admin_by_token_service(db, is_admin, token):
    """
    Resolve the admin behind a token

    Args:
        db: Database connection
        is_admin: Admin flag sent by the client
        token: JWT issued at registration

    Raises:
        AuthError: not flagged as admin, missing/invalid/expired token, or
            no admin linked to the token's user
    """
    try:
        if not is_admin:
            raise AuthError("Not an Admin, authorization denied")

        if not token:
            raise AuthError("No token, authorization denied")

        decoded = verify_token(token)
        if not decoded:
            logger.warning("Admin lookup with invalid or expired token")
            raise AuthError("Token is not valid")

        admin = await get_admin_by_user(db, decoded.get("userId"))
        if not admin:
            raise AuthError("Token is not valid")

        return create_success_response(admin=serialize_document(admin))

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Admin token lookup error: {str(e)}")
        raise InternalError("Server error")


async def delete_admin_service(db, email: str):
    """Delete the admin with this email together with its user account"""
    try:
        admin = await get_admin_by_email(db, email)
        if not admin:
            raise NotFoundError("Admin does not exist")

        await delete_user(db, admin.get("user"))
        await delete_admin(db, admin["_id"])

        logger.info(f"Admin deleted: {admin['email']}")

        return create_success_response(msg="Admin deleted")

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Admin deletion error: {str(e)}")
        raise InternalError("Server error")
