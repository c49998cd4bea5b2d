"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from civic_pulse_api.app.services.storage import Storage


def get_storage(request: Request) -> Storage:
    """Return the store owned by the running application."""
    return request.app.state.storage
