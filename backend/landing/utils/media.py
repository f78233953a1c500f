from typing import Any, Optional

# Legacy keys were stored with the bucket name prefixed
BUCKET_PREFIX = "mediabucket/"


def media_url(reference: Any, base_url: str = "/media") -> Optional[str]:
    """
    Turn an opaque media reference into a public URL.

    Absolute URLs pass through untouched; storage keys are mounted under
    ``base_url``.
    """
    if not isinstance(reference, str) or not reference:
        return None
    if reference.startswith(("http://", "https://", "//")):
        return reference

    key = reference.lstrip("/")
    if key.startswith(BUCKET_PREFIX):
        key = key[len(BUCKET_PREFIX):]

    return f"{base_url.rstrip('/')}/{key}"
