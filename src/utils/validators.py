"""
Field validators for the user form

Each validator returns an empty string when the value is valid and a
human-readable message otherwise.
"""

import re

from models.user import UserData, UserFormErrors

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[\d\s\-\(\)]+", re.ASCII)
WEBSITE_PATTERN = re.compile(r"https?://[^\s$.?#].[^\s]*")

def validate_name(name: str) -> str:
    if not name.strip():
        return "Name is required"
    if len(name) < 2:
        return "Name must be at least 2 characters"
    return ""

def validate_username(username: str) -> str:
    if not username.strip():
        return "Username is required"
    if len(username) < 3:
        return "Username must be at least 3 characters"
    if not USERNAME_PATTERN.fullmatch(username):
        return "Username can only contain letters, numbers, and underscores"
    return ""

def validate_email(email: str) -> str:
    if not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(email):
        return "Invalid email format"
    return ""

def validate_phone(phone: str) -> str:
    """Phone is optional; only a non-empty value is checked"""
    if phone and not PHONE_PATTERN.fullmatch(phone):
        return "Invalid phone number format"
    return ""

def validate_website(website: str) -> str:
    """Website is optional; only a non-empty value is checked"""
    if website and not WEBSITE_PATTERN.fullmatch(website):
        return "Invalid website URL"
    return ""

def validate_user_data(data: UserData) -> UserFormErrors:
    """
    Run all five validators unconditionally

    Args:
        data: Submitted field values

    Returns:
        UserFormErrors with every slot filled, valid fields as empty strings
    """
    return UserFormErrors(
        name=validate_name(data.name),
        username=validate_username(data.username),
        email=validate_email(data.email),
        phone=validate_phone(data.phone),
        website=validate_website(data.website),
    )
