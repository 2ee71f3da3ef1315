"""
Deal Status Validation
"""

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Validations
from .deal_id_validation import DealIdValidation





class DealStatusValidation:

    def validate(self, args: dict):
        """
        Validate id + status for the status-only update
        """

        if args.get("id") is None or not args.get("status"):
            raise ValidationException(
                message = messages.ERROR['STATUS_REQUIRED']
            )

        DealIdValidation().validate(args)

        if args["status"] not in constants.DEAL_STATUSES:
            raise ValidationException(
                message = messages.ERROR['INVALID_STATUS']
            )

        return True
