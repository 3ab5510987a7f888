"""
Common Error Constants

Centralized error messages shared by the engine logs and the HTTP adapter.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_NOT_IN_CART = "Product is not in the cart"
ERROR_DUPLICATE_PRODUCT_ID = "Duplicate product id in catalog"
ERROR_NEGATIVE_PRICE = "Product price must be non-negative"

# Gift errors
ERROR_GIFT_ENGINE_MANAGED = "Gift line is managed by the cart and cannot be changed directly"
ERROR_GIFT_ID_COLLISION = "Gift id collides with a catalog product id"
ERROR_GIFT_NOT_FREE = "Gift price must be zero"

# Configuration errors
ERROR_NEGATIVE_THRESHOLD = "Gift threshold must be non-negative"
ERROR_INVALID_DURATION = "Gift notification duration must be positive"
ERROR_INVALID_CATALOG = "Catalog file must contain a list of products"
ERROR_INVALID_AMOUNT = "Setting must be a plain decimal number"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
