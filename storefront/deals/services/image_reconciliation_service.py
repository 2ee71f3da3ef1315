"""
Image Reconciliation Service

Handles:
    - Collect uploaded dealImage* files in slot order
    - Upload new images (concurrently, order preserved)
    - Remove images by URL and delete them from the media host (best effort)
    - Compute the final ordered image list for an update
"""

# Python Packages
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List

# Vendors
from ...vendors.aws.media_reference import resolve_media_identifier

# Exceptions
from ...util.exceptions import AppException, RemoteServiceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





@dataclass
class ReconciliationResult:
    images: List[str]
    removed_identifiers: List[str] = field(default_factory = list)
    failed_deletions: List[str] = field(default_factory = list)
    uploaded: List[str] = field(default_factory = list)



class ImageReconciliationService:

    def __init__(self, media_store, deal_config):
        """
        Args:
            media_store: object with upload(file) -> url and delete(identifier)
            deal_config (DealConfig): image field prefix, slots, worker count
        """

        self.media_store = media_store
        self.deal_config = deal_config


    # ---------------------------------------------------------
    # 🔹 Uploaded Files
    # ---------------------------------------------------------
    def collect_create_files(self, files: dict) -> list:
        """
        dealImage1..dealImageN, the fixed slots accepted on create
        """

        prefix = self.deal_config.image_field_prefix
        slots = range(1, self.deal_config.create_image_slots + 1)

        return [
            files[f"{prefix}{slot}"]
            for slot in slots
            if files.get(f"{prefix}{slot}")
        ]


    def collect_update_files(self, files: dict) -> list:
        """
        Every dealImage* field, ordered by its numeric suffix
        """

        prefix = self.deal_config.image_field_prefix
        pattern = re.compile(rf"^{re.escape(prefix)}(\d*)$")

        keyed = []
        for key, file in (files or {}).items():
            match = pattern.match(key)
            if match and file:
                suffix = match.group(1)
                keyed.append(((0, int(suffix)) if suffix else (1, 0), key, file))

        keyed.sort(key = lambda item: (item[0], item[1]))

        return [file for _, _, file in keyed]


    # ---------------------------------------------------------
    # 🔹 Remote Calls
    # ---------------------------------------------------------
    def upload_images(self, files: list) -> list:
        """
        Upload files, wait for all, return URLs in input order.

        Raises:
            RemoteServiceException: if any upload fails
        """

        if not files:
            return []

        with ThreadPoolExecutor(max_workers = self._workers(len(files))) as executor:
            futures = [executor.submit(self._upload_one, file) for file in files]

        # Leaving the pool waited for every upload
        return [future.result() for future in futures]


    def delete_identifiers(self, identifiers: list) -> list:
        """
        Delete each identifier independently.

        Returns:
            list: identifiers whose deletion failed (logged, never raised)
        """

        if not identifiers:
            return []

        with ThreadPoolExecutor(max_workers = self._workers(len(identifiers))) as executor:
            futures = {
                identifier: executor.submit(self.media_store.delete, identifier)
                for identifier in identifiers
            }

        failed = []
        for identifier, future in futures.items():
            try:
                future.result()
                logger.info("Deleted media asset %s", identifier)

            except Exception as error:
                logger.warning("Media delete failed for %s: %s", identifier, error)
                failed.append(identifier)

        return failed


    # ---------------------------------------------------------
    # 🔹 Reconcile
    # ---------------------------------------------------------
    def reconcile(self, current_images: list, removed_urls: list, files: dict) -> ReconciliationResult:
        """
        Final image list = current - removed + new uploads (appended).

        Args:
            current_images (list): stored image URLs
            removed_urls (list): URLs the caller removed (already normalized)
            files (dict): uploaded files keyed by form field
        """

        images = list(current_images or [])
        removed_urls = list(removed_urls or [])

        removed_identifiers = []
        for url in removed_urls:
            identifier = resolve_media_identifier(url)
            if identifier and identifier not in removed_identifiers:
                removed_identifiers.append(identifier)

        # Step 1: Upload new images first; a failed upload aborts before anything is deleted
        uploaded = self.upload_images(self.collect_update_files(files))

        # Step 2: Remove selected images
        if removed_urls:
            removed_set = set(removed_urls)
            images = [
                url for url in images
                if url not in removed_set
                and resolve_media_identifier(url) not in removed_identifiers
            ]

        failed = self.delete_identifiers(removed_identifiers)

        # Step 3: Append new images
        images.extend(uploaded)

        return ReconciliationResult(
            images = images,
            removed_identifiers = removed_identifiers,
            failed_deletions = failed,
            uploaded = uploaded
        )


    def _upload_one(self, file) -> str:
        try:
            return self.media_store.upload(file)

        except AppException:
            raise

        except Exception as error:
            raise RemoteServiceException(
                error_code = "MEDIA_UPLOAD_FAILED",
                message = messages.ERROR["MEDIA_UPLOAD_FAILED"],
                details = str(error)
            )


    def _workers(self, count: int) -> int:
        return max(1, min(count, self.deal_config.max_workers))
