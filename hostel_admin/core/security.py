from datetime import datetime, timedelta
from jose import jwt
from passlib.context import CryptContext
from hostel_admin.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings["BCRYPT_ROUNDS"]
)

def get_password_hash(password):
    """Create password hash from plain text password"""
    return pwd_context.hash(password)

def verify_password(plain_password, hashed_password):
    """Verify plain text password against hashed password"""
    return pwd_context.verify(plain_password, hashed_password)

def generate_token(user_id, is_admin, expires_delta=None):
    """Create a signed JWT carrying the user id and admin flag"""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings["ACCESS_TOKEN_EXPIRE_MINUTES"])
    
    to_encode = {
        "userId": str(user_id),
        "isAdmin": bool(is_admin),
        "exp": expire
    }
    return jwt.encode(to_encode, settings["SECRET_KEY"], algorithm=settings["ALGORITHM"])

def verify_token(token):
    """Decode JWT token, returning None if it is invalid or expired"""
    try:
        payload = jwt.decode(token, settings["SECRET_KEY"], algorithms=[settings["ALGORITHM"]])
        return payload
    except jwt.JWTError:
        return None
