"""
Deal Status / Deal ID Requests

Handles:
    - Swagger body models for status, single and remove APIs
    - Extract JSON (or form) payload
"""

from flask_restx import fields

# Request helpers
from .add_deal_request import read_body

# Payload normalization
from .payload import parse_flag





class DealStatusRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Update Deal Status
        """

        model = namespace.model("DealStatusRequest", {
            "id": fields.Integer(
                required = True,
                description = "Deal ID to update"
            ),
            "status": fields.String(
                required = True,
                enum = ["draft", "published", "archived", "scheduled"],
                description = "New status"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        body = read_body()

        return {
            "id": body.get("id"),
            "status": body.get("status")
        }



class SingleDealRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SingleDealRequest", {
            "dealId": fields.Integer(required = True, description = "Deal ID")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return {"id": read_body().get("dealId")}



class RemoveDealRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("RemoveDealRequest", {
            "id": fields.Integer(required = True, description = "Deal ID"),
            "purgeImages": fields.Boolean(
                default = False,
                description = "Also delete the deal images from the media host"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        body = read_body()

        return {
            "id": body.get("id"),
            "purgeImages": parse_flag(body.get("purgeImages"))
        }
