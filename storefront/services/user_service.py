# storefront/services/user_service.py
import uuid
from typing import Optional

from storefront.domain.schemas import User
from storefront.utils.settings import ADMIN_EMAIL


def _user_id() -> str:
    return f"user-{uuid.uuid4().hex[:12]}"


def login(email: str, password: str, admin_email: str = ADMIN_EMAIL) -> Optional[User]:
    """Demo login. Passwords are not checked against anything."""
    email = email.strip()

    if email.lower() == admin_email.lower():
        return User(id="admin", email=email, name="Admin", is_admin=True)

    if email and password:
        return User(id=_user_id(), email=email, name=email.split("@")[0], is_admin=False)

    return None


def register(email: str, password: str, name: str) -> Optional[User]:
    email = email.strip()
    if email and password and name.strip():
        return User(id=_user_id(), email=email, name=name.strip(), is_admin=False)
    return None
