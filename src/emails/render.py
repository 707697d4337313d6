import importlib
from pathlib import Path
from typing import Any, Literal, TypedDict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TemplateType = Literal["organization_request"]
LocaleType = Literal["en", "es", "fr"]

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "es", "fr")


class EmailData(TypedDict):
    html: str
    subject: str
    reply_to: str


TEMPLATE_DIR = Path(__file__).parent / "template"

jinja_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
    undefined=StrictUndefined,
)


def get_admin_url(base_url: str, path: str = "admin/organizations/requests") -> str:
    """Build a link into the admin area of the web app."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def render_email(
    template_name: TemplateType,
    locale: LocaleType = "en",
    context: dict[str, Any] | None = None,
) -> EmailData:
    translations_module = importlib.import_module(
        f"src.emails.template.{template_name}.translations"
    )
    default_translations = translations_module.DEFAULT_TRANSLATIONS

    translations = default_translations.get(locale, default_translations["en"])

    template = jinja_env.get_template(f"{template_name}/{template_name}.html")

    html_content = template.render(translations=translations, **(context or {}))

    subject = translations["subject"].format(**(context or {}))

    return EmailData(
        html=html_content,
        subject=subject,
        reply_to=translations.get("reply_to", "support@volunteerhub.org"),
    )
