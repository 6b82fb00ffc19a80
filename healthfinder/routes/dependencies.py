# healthfinder/routes/dependencies.py
from fastapi import Request

from healthfinder.services.facility_directory import FacilityDirectory


def get_directory(request: Request) -> FacilityDirectory:
    """The directory built at startup and attached to app.state."""
    return request.app.state.directory
