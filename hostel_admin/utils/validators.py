import re
from datetime import datetime

from email_validator import EmailNotValidError, validate_email as check_email

def validate_email(email):
    """Validate email format with the same rules pydantic applies to EmailStr"""
    if not email or not isinstance(email, str):
        return False
    
    try:
        check_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True

def validate_cnic(cnic):
    """Validate a 13 digit CNIC, with or without dashes (12345-1234567-1)"""
    if not cnic or not isinstance(cnic, str):
        return False
    
    pattern = r'^\d{5}-?\d{7}-?\d$'
    return bool(re.match(pattern, cnic.strip()))

def validate_contact(contact):
    """Validate a phone number: optional leading +, then 7-15 digits"""
    if not contact or not isinstance(contact, str):
        return False
    
    digits = re.sub(r'[\s-]', '', contact.strip())
    return bool(re.match(r'^\+?\d{7,15}$', digits))

def validate_dob(dob):
    """Validate an ISO date of birth (YYYY-MM-DD) that is not in the future"""
    if not dob or not isinstance(dob, str):
        return False
    
    try:
        parsed = datetime.strptime(dob.strip(), "%Y-%m-%d")
    except ValueError:
        return False
    
    return parsed <= datetime.utcnow()

def missing_fields(data, fields):
    """Return the names of required fields that are absent or empty"""
    missing = []
    for field in fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing
