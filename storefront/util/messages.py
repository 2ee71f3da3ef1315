""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "DEAL_CREATE_SUCCESS"       :   "Deal Created Successfully",
    "DEAL_UPDATE_SUCCESS"       :   "Deal Updated Successfully",
    "DEAL_STATUS_SUCCESS"       :   "Deal status updated successfully",
    "DEAL_DELETE_SUCCESS"       :   "Deal Removed Successfully"
}


# ERROR MESSAGES
ERROR = {
    # Deal Errors
    "DEAL_ID_REQUIRED"          :   "Deal ID is required",
    "INVALID_DEAL_ID"           :   "Deal ID must be a positive integer",
    "DEAL_NOT_FOUND"            :   "Deal not found",
    "DEAL_NAME_REQUIRED"        :   "Deal name is required",
    "DEAL_DISCOUNT_REQUIRED"    :   "Deal discount value is required",
    "INVALID_NUMBER"            :   "{field} must be a number",
    "INVALID_DATE"              :   "{field} must be a valid date",
    "INVALID_TEXT"              :   "{field} must be text",
    "INVALID_REQUEST"           :   "Request body must be a JSON object",
    "INVALID_DISCOUNT_TYPE"     :   "Invalid discount type. Must be: percentage or fixed",
    "INVALID_DEAL_PRODUCTS"     :   "Invalid deal products format",
    "INVALID_REMOVED_IMAGES"    :   "Invalid removed images format",
    "STATUS_REQUIRED"           :   "Deal ID and status are required",
    "INVALID_STATUS"            :   "Invalid status. Must be: draft, published, archived, or scheduled",

    # Persistence Errors
    "DEAL_CREATE_FAILED"        :   "Unable to create deal. Please try again.",
    "DEAL_UPDATE_FAILED"        :   "Unable to update deal.",
    "DEAL_DELETE_FAILED"        :   "Unable to delete deal.",
    "DEAL_READ_FAILED"          :   "Unable to load deals.",

    # Media Errors
    "MEDIA_UPLOAD_FAILED"       :   "Image upload failed. Please try again.",
    "MEDIA_DELETE_FAILED"       :   "Image delete failed.",
}
