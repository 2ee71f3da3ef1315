"""
Edit Deal Service

Handles:
    - Overwrite deal fields
    - Reconcile deal images (remove selected, append new uploads)
"""

# Python Packages
import logging
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Services
from .deal_lookup import find_deal
from .deal_record_builder import DealRecordBuilder
from .image_reconciliation_service import ImageReconciliationService
from .deal_format import format_deal

# Exceptions
from ...util.exceptions import PersistenceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class EditDealService:

    def __init__(self, media_store, deal_config):
        self.builder = DealRecordBuilder(deal_config)
        self.images = ImageReconciliationService(media_store, deal_config)


    def edit_deal(self, args: dict) -> dict:
        """
        Update a deal: fetch existing -> compute updates -> write.

        Concurrent updates of the same deal are last-write-wins.

        Args:
            args (dict): validated request fields, "id" already an int

        Returns:
            dict: stored deal
        """

        deal = find_deal(args["id"])

        record = self.builder.build_for_update(args)

        result = self.images.reconcile(
            current_images = deal.images,
            removed_urls = args.get("removedImages"),
            files = args.get("files")
        )
        record["images"] = result.images

        if result.failed_deletions:
            logger.warning(
                "Deal %s: %d removed image(s) could not be deleted from the media host: %s",
                deal.deal_id, len(result.failed_deletions), result.failed_deletions
            )

        try:
            for column, value in record.items():
                setattr(deal, column, value)

            db.session.commit()

        except SQLAlchemyError as errors:
            db.session.rollback()

            raise PersistenceException(
                error_code = "DEAL_UPDATE_FAILED",
                message = messages.ERROR['DEAL_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info(
            "Deal %s updated: %d image(s), %d removed, %d added",
            deal.deal_id, len(deal.images), len(result.removed_identifiers), len(result.uploaded)
        )

        return format_deal(deal)
