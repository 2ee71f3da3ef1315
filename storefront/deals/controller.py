"""
Deal Controller

Handles:
    - Orchestration between handler and service layer
    - Wiring the configured media store and deal settings into services
"""

# Python Packages
from flask import current_app

# Services
from .services.add_deal_service import AddDealService
from .services.list_deal_service import ListDealService
from .services.edit_deal_service import EditDealService
from .services.deal_status_service import DealStatusService
from .services.delete_deal_service import DeleteDealService





class DealController:

    def __init__(self, media_store, deal_config):
        """ Initialize controller with its collaborators... """

        self.media_store = media_store
        self.deal_config = deal_config


    @classmethod
    def from_app(cls, app = None):
        """
        Controller built from what the app factory registered
        """

        app = app or current_app

        return cls(
            media_store = app.extensions["media_store"],
            deal_config = app.extensions["deal_config"]
        )


    def create_deal(self, args: dict) -> dict:
        """
        Create deal and upload its images

        Args:
            args (dict): deal fields + "files"

        Returns:
            dict: stored deal
        """

        return AddDealService(self.media_store, self.deal_config).create_deal(args)



    def list_deals(self) -> list:
        """
        All deals, newest first
        """

        return ListDealService().list_deals()



    def get_deal(self, deal_id: int) -> dict:

        return ListDealService().get_deal(deal_id)



    def edit_deal(self, args: dict) -> dict:
        """
        Overwrite deal fields and reconcile its images

        Args:
            args (dict): deal fields + id, status, removedImages, files

        Returns:
            dict: stored deal
        """

        return EditDealService(self.media_store, self.deal_config).edit_deal(args)



    def update_status(self, deal_id: int, status: str) -> dict:

        return DealStatusService().update_status(deal_id, status)



    def delete_deal(self, deal_id: int, purge_images: bool = False) -> dict:
        """
        Delete deal, optionally purging its images

        Args:
            deal_id (int)
            purge_images (bool)

        Returns:
            dict
        """

        return DeleteDealService(self.media_store, self.deal_config).delete_deal(deal_id, purge_images)
