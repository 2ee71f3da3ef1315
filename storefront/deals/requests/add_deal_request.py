"""
Add Deal Request Definition
Handles:
    - deal fields (form-data or JSON)
    - dealProducts (JSON string or array)
    - dealImage1..dealImage4 (image uploads)
"""

# Python Packages
from flask import request as flask_request

# Payload normalization
from .payload import parse_products

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages


# (field, description, required)
DEAL_FORM_FIELDS = [
    ("dealName", "Deal Name", True),
    ("dealDescription", "Description", False),
    ("dealDiscountType", "percentage | fixed", False),
    ("dealDiscountValue", "Discount Value", True),
    ("dealProducts", "JSON array of {productId, name, price, quantity}", False),
    ("dealTotal", "Total of product prices", False),
    ("dealFinalPrice", "Price after discount", False),
    ("dealStartDate", "ISO date, defaults to now", False),
    ("dealEndDate", "ISO date, empty = open-ended", False),
    ("dealType", "Deal type, defaults to flash_sale", False),
]

DEAL_IMAGE_FIELDS = ["dealImage1", "dealImage2", "dealImage3", "dealImage4"]





def read_body() -> dict:
    """
    JSON body or form fields as a plain dict
    """

    if flask_request.is_json:
        body = flask_request.get_json(silent = True)

        if body is None:
            return {}

        if not isinstance(body, dict):
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        return body

    return flask_request.form.to_dict()



def read_files() -> dict:
    """
    Uploaded files keyed by form field name (first file per field)
    """

    return {
        key: file
        for key, file in flask_request.files.items()
        if file and file.filename
    }



def extract_deal_fields(body: dict) -> dict:
    """
    Pick the deal fields out of a request body, products normalized
    """

    data = {name: body.get(name) for name, _, _ in DEAL_FORM_FIELDS}
    data["dealProducts"] = parse_products(body.get("dealProducts"))

    return data



def document_deal_form(namespace, func):
    """
    Swagger formData params shared by add and update
    """

    func = namespace.doc(consumes = ['multipart/form-data', 'application/json'])(func)

    for name, description, required in DEAL_FORM_FIELDS:
        func = namespace.param(
            name,
            description,
            _in = 'formData',
            required = required
        )(func)

    for name in DEAL_IMAGE_FIELDS:
        func = namespace.param(
            name,
            'Deal Image',
            type = 'file',
            _in = 'formData',
            required = False
        )(func)

    return func



class AddDealRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            return document_deal_form(namespace, func)

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        data = extract_deal_fields(read_body())
        data["files"] = read_files()

        return data
