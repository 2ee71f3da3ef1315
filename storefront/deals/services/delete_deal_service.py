"""
Delete Deal Service

Handles:
    - Delete Deal
    - Optionally purge its images from the media host
"""

# Python Packages
import logging
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Services
from .deal_lookup import find_deal
from .image_reconciliation_service import ImageReconciliationService

# Vendors
from ...vendors.aws.media_reference import resolve_media_identifier

# Exceptions
from ...util.exceptions import PersistenceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class DeleteDealService:

    def __init__(self, media_store, deal_config):
        self.images = ImageReconciliationService(media_store, deal_config)


    def delete_deal(self, deal_id: int, purge_images: bool = False) -> dict:
        """
        Delete deal. Its images stay on the media host unless purge_images.

        Args:
            deal_id (int)
            purge_images (bool): best-effort delete of the deal images

        Returns:
            dict
        """

        # 🔹 Fetch Deal
        deal = find_deal(deal_id)
        images = list(deal.images or [])

        # 🔹 Delete Deal (DB)
        try:
            db.session.delete(deal)
            db.session.commit()

        except SQLAlchemyError as errors:
            db.session.rollback()

            raise PersistenceException(
                error_code = "DEAL_DELETE_FAILED",
                message = messages.ERROR['DEAL_DELETE_FAILED'],
                details = str(errors)
            )

        logger.info("Deal %s deleted", deal_id)

        # 🔹 Purge images only once the record is gone
        failed = []
        if purge_images:
            identifiers = [
                identifier
                for identifier in dict.fromkeys(resolve_media_identifier(url) for url in images)
                if identifier
            ]
            failed = self.images.delete_identifiers(identifiers)

        return {
            "deal_id": deal_id,
            "purged_images": purge_images,
            "failed_deletions": failed
        }
