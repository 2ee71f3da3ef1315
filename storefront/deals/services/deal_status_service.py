"""
Deal Status Service

Handles:
    - Status-only update (any status may follow any other)
"""

# Python Packages
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Services
from .deal_lookup import find_deal
from .deal_format import format_deal

# Exceptions
from ...util.exceptions import PersistenceException

# App Messages
from ...util import messages





class DealStatusService:

    def update_status(self, deal_id: int, status: str) -> dict:

        deal = find_deal(deal_id)

        try:
            deal.status = status
            db.session.commit()

        except SQLAlchemyError as errors:
            db.session.rollback()

            raise PersistenceException(
                error_code = "DEAL_UPDATE_FAILED",
                message = messages.ERROR['DEAL_UPDATE_FAILED'],
                details = str(errors)
            )

        return format_deal(deal)
