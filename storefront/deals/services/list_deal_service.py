"""
List Deal Service

Handles:
    - Fetch all deals, newest first
    - Fetch a single deal
"""

# Python Packages
from sqlalchemy.exc import SQLAlchemyError

# Models
from ...models.deal import Deal

# Services
from .deal_lookup import find_deal
from .deal_format import format_deal

# Exceptions
from ...util.exceptions import PersistenceException

# App Messages
from ...util import messages





class ListDealService:

    def list_deals(self) -> list:
        """
        Fetch every deal ordered latest first
        """

        try:
            deals = Deal.query.order_by(
                Deal.created_at.desc(),
                Deal.deal_id.desc()
            ).all()

        except SQLAlchemyError as errors:
            raise PersistenceException(
                error_code = "DEAL_READ_FAILED",
                message = messages.ERROR['DEAL_READ_FAILED'],
                details = str(errors)
            )

        return [format_deal(deal) for deal in deals]


    def get_deal(self, deal_id: int) -> dict:
        return format_deal(find_deal(deal_id))
