"""Admin Accounts — provisioning of operator accounts.

Invariants:
    - Passwords are hashed before they reach the store
    - Duplicate usernames are rejected by the store's unique constraint (OperationError)
    - Not exposed over HTTP; used by scripts/create_admin.py
"""

import logging

from records_api.core.domain_types import AdminRole
from records_api.core.errors import ValidationError
from records_api.core.passwords import hash_password
from records_api.infrastructure.record_store import RecordStore
from records_api.models.admin_account import AdminAccount

logger = logging.getLogger(__name__)


async def create_admin(
    store: RecordStore,
    username: str,
    password: str,
    email: str | None = None,
    role: AdminRole = AdminRole.ADMIN,
) -> AdminAccount:
    """Create an admin account with a hashed password."""
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Username and password are required")
    account = await store.insert(AdminAccount(
        username=username,
        password_hash=hash_password(password),
        email=email or None,
        role=AdminRole(role).value,
    ))
    logger.info(f"Admin account created: {username}", extra={"record_id": str(account.id)})
    return account

