"""
Media Reference Resolver

Stored image URLs look like:
    https://<host>/upload/deals/3f2a9c.jpg
    https://<host>/upload/v1712345678/deals/3f2a9c.jpg   (versioned)

The identifier is the path after ``upload/`` (and the optional version
segment) without the extension, e.g. ``deals/3f2a9c``.
"""

# Python Packages
import re


MEDIA_URL_PATTERN = re.compile(r"/upload/(?:v\d+/)?([^.]+)\.\w+$")





def resolve_media_identifier(url):
    """
    Extract the storage identifier from a media URL.

    Returns:
        str | None: identifier, or None when the URL does not match
    """

    if not isinstance(url, str):
        return None

    match = MEDIA_URL_PATTERN.search(url)

    return match.group(1) if match else None
