from src.emails.render import (
    SUPPORTED_LOCALES,
    EmailData,
    LocaleType,
    TemplateType,
    get_admin_url,
    render_email,
)

__all__ = [
    "SUPPORTED_LOCALES",
    "EmailData",
    "LocaleType",
    "TemplateType",
    "get_admin_url",
    "render_email",
]
