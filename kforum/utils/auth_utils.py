# kforum/utils/auth_utils.py
from __future__ import annotations

import os

from bson import ObjectId
from dotenv import load_dotenv
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ..db.mongo import users_collection

load_dotenv()

# ------------------------------------------------------------------
# Config
# ------------------------------------------------------------------
# Support either JWT_SECRET_KEY or JWT_SECRET (fallback)
SECRET_KEY = os.getenv("JWT_SECRET_KEY") or os.getenv("JWT_SECRET") or ""
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

ADMIN_ROLES = {"admin", "moderator"}

bearer_scheme = HTTPBearer(auto_error=True)


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def decode_user_id(token: str) -> str:
    if not SECRET_KEY:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="JWT secret not configured.")
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token.")

    user_id = payload.get("user_id") or payload.get("userId")
    if not user_id or not ObjectId.is_valid(str(user_id)):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload.")
    return str(user_id)


def is_admin(user: dict) -> bool:
    return user.get("role") in ADMIN_ROLES or user.get("is_admin") is True


# ------------------------------------------------------------------
# Public dependencies
# ------------------------------------------------------------------
async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
):
    """
    Validates the Bearer JWT and loads the user.
    Returns the Mongo user document (with ObjectId _id).
    """
    user_id = decode_user_id(credentials.credentials)
    user = await users_collection.find_one({"_id": ObjectId(user_id)})
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found.")
    return user


async def get_current_admin_user(user: dict = Depends(get_current_user)):
    """Admin guard: role admin or moderator."""
    if not is_admin(user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return user
