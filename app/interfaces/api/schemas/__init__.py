from .auth import LoginRequest, RegisterRequest, TokenResponse, UserRead
from .template_kit import (
    ExtensionSearchMeta,
    ExtensionSearchResponse,
    MessageResponse,
    TemplateKitCreate,
    TemplateKitEnvelope,
    TemplateKitMessageEnvelope,
    TemplateKitPage,
    TemplateKitRead,
    TemplateKitUpdate,
)

__all__ = [
    "ExtensionSearchMeta",
    "ExtensionSearchResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "TemplateKitCreate",
    "TemplateKitEnvelope",
    "TemplateKitMessageEnvelope",
    "TemplateKitPage",
    "TemplateKitRead",
    "TemplateKitUpdate",
    "TokenResponse",
    "UserRead",
]
