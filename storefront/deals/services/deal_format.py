"""
Deal response formatting, shared by every deal service
"""





def format_datetime(value):
    """ Datetime Format... """

    return value.isoformat() if value else None



def format_deal(deal) -> dict:
    """
    Deal model -> API dict (storefront/admin field names)
    """

    return {
        "id": deal.deal_id,
        "dealName": deal.name,
        "dealDescription": deal.description,
        "dealDiscountType": deal.discount_type,
        "dealDiscountValue": deal.discount_value,
        "dealProducts": list(deal.products or []),
        "dealImages": list(deal.images or []),
        "dealTotal": deal.total,
        "dealFinalPrice": deal.final_price,
        "dealStartDate": format_datetime(deal.start_date),
        "dealEndDate": format_datetime(deal.end_date),
        "dealType": deal.deal_type,
        "status": deal.status,
        "createdAt": format_datetime(deal.created_at),
        "updatedAt": format_datetime(deal.updated_at)
    }
