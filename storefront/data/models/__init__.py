# import all models so SQLAlchemy registers them in Base.metadata
from storefront.data.models.slot import SlotModel

__all__ = ["SlotModel"]
