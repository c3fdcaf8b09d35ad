"""
ecommerce_http_api
------------------

HTTP API for a small e-commerce backend: users, products and orders.

The ASGI application lives in ``ecommerce_http_api.main`` (``create_app()``
and the module-level ``app``); it is not imported here so that the models,
schemas and services can be used without building an application.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("ecommerce-http-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
