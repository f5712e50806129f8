# catalog_hierarchy/utils/url_utils.py
import re

ROOT_URL_KEY = "/"


def slugify(name: str) -> str:
    """Derive a url key from a display name: "Running Shoes" -> "running-shoes" """
    text = str(name or "").strip().lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def is_blank(value) -> bool:
    return value is None or not str(value).strip()
