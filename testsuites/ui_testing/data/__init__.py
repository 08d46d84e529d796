from .swag_labs import (
    CATALOG_SIZE,
    CUSTOMERS,
    INVALID_USER,
    USERS,
    Customer,
    ErrorMessages,
    Products,
    User,
)

__all__ = [
    "CATALOG_SIZE",
    "CUSTOMERS",
    "INVALID_USER",
    "USERS",
    "Customer",
    "ErrorMessages",
    "Products",
    "User",
]
