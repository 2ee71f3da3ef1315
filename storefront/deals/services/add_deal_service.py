"""
Add Deal Service

Handles:
    - Build normalized deal record
    - Upload deal images to the media host
    - Store Deal
"""

# Python Packages
import logging
from sqlalchemy.exc import SQLAlchemyError

# Database
from ...config.database import db

# Models
from ...models.deal import Deal

# Services
from .deal_record_builder import DealRecordBuilder
from .image_reconciliation_service import ImageReconciliationService
from .deal_format import format_deal

# Exceptions
from ...util.exceptions import PersistenceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class AddDealService:

    def __init__(self, media_store, deal_config):
        self.builder = DealRecordBuilder(deal_config)
        self.images = ImageReconciliationService(media_store, deal_config)


    def create_deal(self, args: dict) -> dict:
        """
        Create deal and upload its images

        Args:
            args (dict): normalized request fields + "files"

        Returns:
            dict: stored deal
        """

        # 1️⃣ Build record (validation errors stop here, before any upload)
        record = self.builder.build_for_create(args)

        # 2️⃣ Upload images
        files = self.images.collect_create_files(args.get("files") or {})
        record["images"] = self.images.upload_images(files)

        # 3️⃣ Store Deal
        try:
            deal = Deal(**record)
            db.session.add(deal)
            db.session.commit()

        except SQLAlchemyError as errors:
            db.session.rollback()

            # Uploaded images stay on the media host
            logger.error("Deal create failed after uploading %d image(s): %s", len(record["images"]), errors)

            raise PersistenceException(
                error_code = "DEAL_CREATE_FAILED",
                message = messages.ERROR['DEAL_CREATE_FAILED'],
                details = str(errors)
            )

        logger.info("Deal %s created with %d image(s)", deal.deal_id, len(deal.images))

        return format_deal(deal)
