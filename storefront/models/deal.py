"""
Model: Deal
Table: deals

A promotional bundle shown on the storefront. Holds a products snapshot,
an ordered image gallery and a publication status.
"""

# Python Packages
from datetime import datetime, timezone
from sqlalchemy import func

# Database
from ..config.database import db

# Constants
from ..base import constants





def utc_now():
    return datetime.now(timezone.utc)



class Deal(db.Model):
    """ A storefront deal... """

    # Table Name
    __tablename__ = "deals"

    deal_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    description = db.Column(db.Text, nullable = False, default = "")

    discount_type = db.Column(
        db.String(20),
        nullable = False,
        default = constants.DEAL_DEFAULT_DISCOUNT_TYPE,
        doc = "One of: percentage / fixed"
    )

    discount_value = db.Column(db.Float, nullable = False)

    products = db.Column(
        db.JSON,
        nullable = False,
        default = list,
        doc = "Ordered product snapshots, e.g. {'productId', 'name', 'price', 'quantity'}."
    )

    images = db.Column(
        db.JSON,
        nullable = False,
        default = list,
        doc = "Ordered public image URLs. Display order = list order."
    )

    total = db.Column(db.Float, nullable = False, default = 0)

    final_price = db.Column(db.Float, nullable = False, default = 0)

    start_date = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    end_date = db.Column(
        db.DateTime(timezone = True),
        nullable = True,
        doc = "NULL = open-ended deal."
    )

    deal_type = db.Column(
        db.String(100),
        nullable = False,
        default = constants.DEAL_DEFAULT_TYPE
    )

    status = db.Column(
        db.String(20),
        nullable = False,
        default = constants.DEAL_DEFAULT_STATUS,
        index = True,
        doc = "One of: draft / published / archived / scheduled"
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        server_default = func.now()
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        server_default = func.now(),
        onupdate = utc_now
    )

    def __repr__(self):
        return f"<Deal {self.deal_id} {self.name}>"
