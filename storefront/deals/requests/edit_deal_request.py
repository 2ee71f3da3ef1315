"""
Edit Deal Request

Handles:
    - Swagger params for Update Deal API
    - Deal fields + id, status, removedImages, any dealImage* upload
"""

# Request helpers
from .add_deal_request import read_body, read_files, extract_deal_fields, document_deal_form

# Payload normalization
from .payload import parse_removed_images





class EditDealRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger params for Edit Deal
        """

        def decorator(func):
            func = document_deal_form(namespace, func)

            func = namespace.param('id', 'Deal ID', _in = 'formData', required = True)(func)
            func = namespace.param('status', 'draft | published | archived | scheduled', _in = 'formData')(func)
            func = namespace.param('removedImages', 'JSON array of image URLs to remove', _in = 'formData')(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        body = read_body()

        data = extract_deal_fields(body)
        data["id"] = body.get("id")
        data["status"] = body.get("status")
        data["removedImages"] = parse_removed_images(body.get("removedImages"))
        data["files"] = read_files()

        return data
