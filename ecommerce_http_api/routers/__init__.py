from . import orders, products, users

__all__ = ["orders", "products", "users"]
