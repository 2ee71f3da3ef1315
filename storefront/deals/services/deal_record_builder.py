"""
Deal Record Builder

Handles:
    - Map request fields to Deal columns
    - Numeric / date coercion with defaults
    - Create: status always draft
    - Update: caller-controlled status, products only when supplied
"""

# Python Packages
import math
from datetime import datetime, timezone

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages





def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())



def parse_number(value, field: str, default = None):
    """
    Permissive numeric parsing: 20, 20.5, " 20 ", "20.5"

    Blank values fall back to ``default``.
    """

    if is_blank(value):
        return default

    if isinstance(value, bool):
        raise ValidationException(message = messages.ERROR['INVALID_NUMBER'].format(field = field))

    try:
        number = float(value.strip() if isinstance(value, str) else value)

    except (TypeError, ValueError):
        raise ValidationException(message = messages.ERROR['INVALID_NUMBER'].format(field = field))

    if not math.isfinite(number):
        raise ValidationException(message = messages.ERROR['INVALID_NUMBER'].format(field = field))

    return number



def parse_date(value, field: str, default = None):
    """
    Permissive date parsing: ISO date / datetime (``Z`` allowed) or epoch
    milliseconds. Naive values are UTC.
    """

    if is_blank(value):
        return default

    try:
        if isinstance(value, datetime):
            parsed = value

        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            parsed = datetime.fromtimestamp(value / 1000, tz = timezone.utc)

        elif isinstance(value, str):
            text = value.strip()

            if text.isdigit():
                parsed = datetime.fromtimestamp(int(text) / 1000, tz = timezone.utc)
            else:
                if text[-1] in "Zz":
                    text = text[:-1] + "+00:00"
                parsed = datetime.fromisoformat(text)

        else:
            raise TypeError(type(value).__name__)

    except (TypeError, ValueError, OverflowError, OSError):
        raise ValidationException(message = messages.ERROR['INVALID_DATE'].format(field = field))

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo = timezone.utc)

    return parsed





class DealRecordBuilder:

    def __init__(self, deal_config):
        self.deal_config = deal_config


    def build_for_create(self, args: dict) -> dict:
        """
        Normalized Deal columns for a new deal (images are added by the caller)
        """

        record = self._common_fields(args)
        record["products"] = args.get("dealProducts") or []
        record["status"] = constants.DEAL_DEFAULT_STATUS

        return record


    def build_for_update(self, args: dict) -> dict:
        """
        Normalized Deal columns that overwrite an existing deal
        """

        record = self._common_fields(args)

        # Products are only replaced when the caller sent them
        if args.get("dealProducts") is not None:
            record["products"] = args["dealProducts"]

        status = args.get("status") or constants.DEAL_DEFAULT_STATUS

        if status not in constants.DEAL_STATUSES:
            raise ValidationException(message = messages.ERROR['INVALID_STATUS'])

        record["status"] = status

        return record


    def _common_fields(self, args: dict) -> dict:

        name = args.get("dealName")

        if is_blank(name) or not isinstance(name, str):
            raise ValidationException(message = messages.ERROR['DEAL_NAME_REQUIRED'])

        discount_value = parse_number(args.get("dealDiscountValue"), "dealDiscountValue")

        if discount_value is None:
            raise ValidationException(message = messages.ERROR['DEAL_DISCOUNT_REQUIRED'])

        discount_type = args.get("dealDiscountType") or constants.DEAL_DEFAULT_DISCOUNT_TYPE

        if discount_type not in constants.DEAL_DISCOUNT_TYPES:
            raise ValidationException(message = messages.ERROR['INVALID_DISCOUNT_TYPE'])

        description = self._optional_text(args, "dealDescription")
        deal_type = self._optional_text(args, "dealType")

        return {
            "name": name.strip(),
            "description": description or "",
            "discount_type": discount_type,
            "discount_value": discount_value,
            "total": parse_number(args.get("dealTotal"), "dealTotal", 0),
            "final_price": parse_number(args.get("dealFinalPrice"), "dealFinalPrice", 0),
            "start_date": parse_date(
                args.get("dealStartDate"),
                "dealStartDate",
                datetime.now(timezone.utc)
            ),
            "end_date": parse_date(args.get("dealEndDate"), "dealEndDate"),
            "deal_type": deal_type or self.deal_config.default_deal_type
        }


    def _optional_text(self, args: dict, field: str):
        """ Optional string field; anything but a string is rejected """

        value = args.get(field)

        if value is not None and not isinstance(value, str):
            raise ValidationException(message = messages.ERROR['INVALID_TEXT'].format(field = field))

        return value
