"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each civic domain (government activities, citizen
issues, officials, vote records, statistics, action plans, users)
defines its schemas in ``schemas`` and exposes a router in
``api/v1/endpoints``.  All of them share a single storage object
built by ``main.create_app``.
"""

from .main import app  # noqa: F401
