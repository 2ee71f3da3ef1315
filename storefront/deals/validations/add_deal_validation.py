"""
Add Deal Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class AddDealValidation:

    def validate(self, args):
        """
        Validate required deal fields
        """

        deal_name = args.get('dealName')
        discount_value = args.get('dealDiscountValue')
        discount_type = args.get('dealDiscountType')

        # -----------------------------------------
        # 🔹 Deal Name Validation
        # -----------------------------------------

        if not isinstance(deal_name, str) or not deal_name.strip():
            raise ValidationException(
                message = messages.ERROR['DEAL_NAME_REQUIRED']
            )

        # -----------------------------------------
        # 🔹 Discount Validation
        # -----------------------------------------

        if discount_value is None or (isinstance(discount_value, str) and not discount_value.strip()):
            raise ValidationException(
                message = messages.ERROR['DEAL_DISCOUNT_REQUIRED']
            )

        if discount_type and discount_type not in constants.DEAL_DISCOUNT_TYPES:
            raise ValidationException(
                message = messages.ERROR['INVALID_DISCOUNT_TYPE']
            )

        return True
