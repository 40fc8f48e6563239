from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Any, Optional

from hostel_admin.utils.validators import validate_cnic, validate_contact, validate_dob


class AdminRegistration(BaseModel):
    """Schema for admin registration.

    Fields are optional here so that a missing field is reported by the
    registration service with a single "All fields are required" error.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    father_name: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None
    dob: Optional[str] = None
    cnic: Optional[str] = None
    hostel: Optional[str] = None
    password: Optional[str] = None


class AdminUpdate(BaseModel):
    """Schema for overwriting an admin's profile, looked up by email"""
    name: str = Field(..., min_length=1)
    email: EmailStr
    father_name: str = Field(..., min_length=1)
    contact: str
    address: str = Field(..., min_length=1)
    dob: str
    cnic: str

    @field_validator('contact')
    @classmethod
    def check_contact(cls, v):
        if not validate_contact(v):
            raise ValueError('Contact must be a valid phone number')
        return v.strip()

    @field_validator('dob')
    @classmethod
    def check_dob(cls, v):
        if not validate_dob(v):
            raise ValueError('Date of birth must be a past date in YYYY-MM-DD format')
        return v.strip()

    @field_validator('cnic')
    @classmethod
    def check_cnic(cls, v):
        if not validate_cnic(v):
            raise ValueError('CNIC must have 13 digits')
        return v.strip()


class AdminHostelLookup(BaseModel):
    """Schema for looking up the hostel an admin manages"""
    id: str = Field(..., min_length=1)


class AdminTokenLookup(BaseModel):
    """Schema for resolving the admin behind a token"""
    # Any JSON value; the service only checks its truthiness
    isAdmin: Any = None
    token: Optional[str] = None


class AdminDeletion(BaseModel):
    """Schema for deleting an admin and its user account"""
    email: EmailStr
