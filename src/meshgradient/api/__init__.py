"""HTTP surface (FastAPI)"""

from .main import create_app
from .dependencies import set_service_container, get_service_container

__all__ = ["create_app", "set_service_container", "get_service_container"]
