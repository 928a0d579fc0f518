"""Models module initialization"""

from omie.models.base import BaseResource, OmieModel, is_blank
from omie.models.company import Company
from omie.models.product import Product
from omie.models.sales_order import SalesOrder
from omie.models.tax_recommendation import TaxRecommendation

__all__ = [
    "BaseResource",
    "OmieModel",
    "is_blank",
    "Company",
    "Product",
    "SalesOrder",
    "TaxRecommendation",
]
