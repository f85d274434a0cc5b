from .audit_log import AuditLogRead
from .auth import AuthResponse, LoginRequest, RegisterRequest, UserRead
from .task import MessageResponse, TaskCreate, TaskRead, TaskUpdate

__all__ = [
    "AuditLogRead",
    "AuthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "UserRead",
]
