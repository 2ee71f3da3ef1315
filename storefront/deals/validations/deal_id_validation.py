"""
Deal ID Validation

Checks:
    - id is provided
    - id is a positive integer (int or numeric string from a form)
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages





class DealIdValidation:

    @staticmethod
    def parse(deal_id) -> int:
        """
        Validate and return the deal id as int
        """

        if deal_id is None or (isinstance(deal_id, str) and not deal_id.strip()):
            raise ValidationException(
                message = messages.ERROR['DEAL_ID_REQUIRED']
            )

        if isinstance(deal_id, bool):
            raise ValidationException(
                message = messages.ERROR['INVALID_DEAL_ID']
            )

        try:
            deal_id = int(str(deal_id).strip())

        except ValueError:
            raise ValidationException(
                message = messages.ERROR['INVALID_DEAL_ID']
            )

        if deal_id <= 0:
            raise ValidationException(
                message = messages.ERROR['INVALID_DEAL_ID']
            )

        return deal_id


    def validate(self, args: dict):
        """
        Normalize args["id"] in place
        """

        args["id"] = self.parse(args.get("id"))

        return True
