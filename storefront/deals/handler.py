"""
File: Deal Routes

Handles:
    - Add Deal
    - List Deals / Single Deal
    - Update Deal (fields + images)
    - Update Deal Status
    - Remove Deal
"""

# Python Packages
import logging

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..deals.requests.add_deal_request import AddDealRequest
from ..deals.requests.edit_deal_request import EditDealRequest
from ..deals.requests.deal_status_request import DealStatusRequest, SingleDealRequest, RemoveDealRequest

# Validations
from ..deals.validations.add_deal_validation import AddDealValidation
from ..deals.validations.edit_deal_validation import EditDealValidation
from ..deals.validations.deal_status_validation import DealStatusValidation
from ..deals.validations.deal_id_validation import DealIdValidation

# Controller
from ..deals.controller import DealController

# Errors & Exceptions
from ..util import messages
from ..util.exceptions import AppException, InternalServerException

# Namespaces
deal_namespace = Namespace('deal', description = 'Deal Management APIs')

logger = logging.getLogger(__name__)





def unexpected_error(error):
    """ Log and wrap anything that is not an AppException... """

    logger.exception("Unhandled deal API error")
    error = InternalServerException(details = str(error))
    return error.to_dict(), error.status_code



@deal_namespace.route('/add')
class AddDeal(Resource):

    @AddDealRequest.apply(deal_namespace)
    def post(self):
        """
        Create new Deal with up to four images
        """

        try:
            # Args
            args = AddDealRequest.get_data()

            # Validations
            AddDealValidation().validate(args)

            # Controller
            deal = DealController.from_app().create_deal(args)

            return {
                "success": True,
                "message": messages.SUCCESS['DEAL_CREATE_SUCCESS'],
                "deal": deal
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)



@deal_namespace.route('/list')
class ListDeals(Resource):

    def get(self):
        """
        List all deals, newest first
        """

        try:
            deals = DealController.from_app().list_deals()

            return {
                "success": True,
                "deals": deals,
                "count": len(deals)
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)



@deal_namespace.route('/single')
class SingleDeal(Resource):

    @SingleDealRequest.apply(deal_namespace)
    def post(self):
        """
        Fetch one deal by dealId
        """

        try:
            args = SingleDealRequest.get_data()
            DealIdValidation().validate(args)

            deal = DealController.from_app().get_deal(args["id"])

            return {
                "success": True,
                "deal": deal
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)



@deal_namespace.route('/update')
class UpdateDeal(Resource):

    @EditDealRequest.apply(deal_namespace)
    def post(self):
        """
        Update deal fields, remove selected images and append new ones
        """

        try:
            args = EditDealRequest.get_data()
            EditDealValidation().validate(args)

            deal = DealController.from_app().edit_deal(args)

            return {
                "success": True,
                "message": messages.SUCCESS['DEAL_UPDATE_SUCCESS'],
                "deal": deal
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)



@deal_namespace.route('/status')
class UpdateDealStatus(Resource):

    @DealStatusRequest.apply(deal_namespace)
    def post(self):
        """
        Change deal status: draft, published, archived or scheduled
        """

        try:
            args = DealStatusRequest.get_data()
            DealStatusValidation().validate(args)

            deal = DealController.from_app().update_status(args["id"], args["status"])

            return {
                "success": True,
                "message": messages.SUCCESS['DEAL_STATUS_SUCCESS'],
                "deal": deal
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)



@deal_namespace.route('/remove')
class RemoveDeal(Resource):

    @RemoveDealRequest.apply(deal_namespace)
    def post(self):
        """
        Delete a deal. Images are kept unless purgeImages is true.
        """

        try:
            args = RemoveDealRequest.get_data()
            DealIdValidation().validate(args)

            DealController.from_app().delete_deal(args["id"], args["purgeImages"])

            return {
                "success": True,
                "message": messages.SUCCESS['DEAL_DELETE_SUCCESS']
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            return unexpected_error(error)
