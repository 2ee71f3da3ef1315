"""
Edit Deal Validation

Checks:
    - id is provided and is an integer
    - deal fields pass the add rules
    - status, when given, is one of the known statuses
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Validations
from .add_deal_validation import AddDealValidation
from .deal_id_validation import DealIdValidation





class EditDealValidation:

    def validate(self, args: dict):

        DealIdValidation().validate(args)

        AddDealValidation().validate(args)

        status = args.get("status")

        if status and status not in constants.DEAL_STATUSES:
            raise ValidationException(
                message = messages.ERROR['INVALID_STATUS']
            )

        return True
