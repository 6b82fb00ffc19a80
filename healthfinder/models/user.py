# healthfinder/models/user.py
from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str
    password: str


class User(UserCreate):
    """Placeholder for future auth. `password` holds a passlib hash, never plain text."""

    id: str
