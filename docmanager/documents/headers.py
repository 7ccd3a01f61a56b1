from pathlib import PurePosixPath
from urllib.parse import quote
import re

_UNSAFE = re.compile(r'[\x00-\x1f\x7f"]')

def safe_name(name: str) -> str:
    """
    Base name of an untrusted filename, fit for a response header.

    Both "/" and "\\" count as separators, so "..\\..\\boot.ini" and
    "../../etc/passwd" reduce to "boot.ini" and "passwd". Quotes and control
    characters are dropped.
    """
    base = PurePosixPath(name.replace("\\", "/")).name
    base = _UNSAFE.sub("", base).strip()
    if not base or base == "..":
        return "download"
    return base

def attachment_disposition(filename: str) -> str:
    name = safe_name(filename)
    quoted = quote(name)
    if quoted != name:
        # RFC 5987 form keeps non-ASCII names latin-1 encodable; plain filename for older clients
        fallback = "".join(c if c.isascii() else "_" for c in name)
        return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quoted}"
    return f'attachment; filename="{name}"'
