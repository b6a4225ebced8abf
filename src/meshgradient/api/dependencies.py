"""
API Dependencies - Service container access for FastAPI endpoints

Pattern:
1. main.py (or a test) builds the ServiceContainer
2. create_app(services) / set_service_container() registers it
3. Endpoints receive it through Depends(get_service_container)
"""

from typing import Optional

from fastapi import Depends, HTTPException, status

from meshgradient.services.editor_service import EditorSession
from meshgradient.services.service_container import ServiceContainer

_service_container: Optional[ServiceContainer] = None


def set_service_container(services: Optional[ServiceContainer]) -> None:
    global _service_container
    _service_container = services


async def get_service_container() -> ServiceContainer:
    """
    Raises:
        HTTPException: 503 if no editor session is registered yet
    """
    if _service_container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service container not initialized. Editor may still be starting."
        )
    return _service_container


async def get_session(services: ServiceContainer = Depends(get_service_container)) -> EditorSession:
    return services.session
