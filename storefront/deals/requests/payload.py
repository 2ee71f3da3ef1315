"""
Request payload normalization

Form posts carry list fields as JSON strings, JSON posts carry them as
native arrays. Everything past the request layer only ever sees lists.
"""

# Python Packages
import json
import logging

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





def parse_list_field(value, message_key: str):
    """
    Normalize a JSON-string-or-list value to a list.

    Args:
        value: raw request value (None, str, list)
        message_key (str): ERROR key raised when the value is malformed

    Returns:
        list | None: None when the field was not supplied

    Raises:
        ValidationException: invalid JSON, or JSON that is not an array
    """

    if value is None:
        return None

    if isinstance(value, str):
        if not value.strip():
            return None

        try:
            value = json.loads(value)

        except ValueError as error:
            raise ValidationException(
                message = messages.ERROR[message_key],
                details = str(error)
            )

    if not isinstance(value, (list, tuple)):
        raise ValidationException(message = messages.ERROR[message_key])

    return list(value)



def parse_products(value):
    """
    dealProducts -> list of product snapshot objects, or None when absent
    """

    products = parse_list_field(value, "INVALID_DEAL_PRODUCTS")

    if products is not None and not all(isinstance(item, dict) for item in products):
        raise ValidationException(message = messages.ERROR["INVALID_DEAL_PRODUCTS"])

    return products



def parse_removed_images(value) -> list:
    """
    removedImages -> list of URL strings

    A malformed value is not worth failing the whole update for: it is
    logged and treated as "nothing removed".
    """

    try:
        removed = parse_list_field(value, "INVALID_REMOVED_IMAGES") or []

    except ValidationException as error:
        logger.warning("Ignoring malformed removedImages %r: %s", value, error.details or error.message)
        return []

    return [url for url in removed if isinstance(url, str) and url]



def parse_flag(value) -> bool:
    """ Form/JSON boolean: true, "true", "1", "yes", "on" """

    if isinstance(value, bool):
        return value

    if value is None:
        return False

    return str(value).strip().lower() in {"1", "true", "yes", "on"}
