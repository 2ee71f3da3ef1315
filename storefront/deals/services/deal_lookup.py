"""
Deal lookup by id
"""

# Python Packages
from sqlalchemy.exc import SQLAlchemyError

# Models
from ...models.deal import Deal

# Exceptions
from ...util.exceptions import NotFoundException, PersistenceException

# App Messages
from ...util import messages





def find_deal(deal_id: int) -> Deal:
    """
    Fetch a deal or raise NotFoundException
    """

    try:
        deal = Deal.query.filter_by(deal_id = deal_id).first()

    except SQLAlchemyError as errors:
        raise PersistenceException(
            error_code = "DEAL_READ_FAILED",
            message = messages.ERROR['DEAL_READ_FAILED'],
            details = str(errors)
        )

    if not deal:
        raise NotFoundException(message = messages.ERROR['DEAL_NOT_FOUND'])

    return deal
