"""Caller identity forwarded by the upstream session layer.

Requests carry ``X-Customer-Id`` (required) and ``X-Customer-Role``
(``user`` or ``admin``, defaulting to ``user``).
"""

from enum import Enum

from fastapi import Depends, Header
from pydantic import BaseModel

from shared.errors import AuthError, Forbidden


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


class Caller(BaseModel):
    customer_id: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def current_caller(
    x_customer_id: str | None = Header(default=None),
    x_customer_role: str | None = Header(default=None),
) -> Caller:
    if not x_customer_id or not x_customer_id.strip():
        raise AuthError("Authentication required", field="X-Customer-Id")

    try:
        role = Role((x_customer_role or Role.USER.value).strip().lower())
    except ValueError:
        raise AuthError(f"Unknown role '{x_customer_role}'", field="X-Customer-Role") from None

    return Caller(customer_id=x_customer_id.strip(), role=role)


def require_admin(caller: Caller = Depends(current_caller)) -> Caller:
    if not caller.is_admin:
        raise Forbidden("Admin access required", field="X-Customer-Role")
    return caller
