"""Business logic services layer.

Core services for anilibrix:
- config_store: Mutable base URL shared by all operations
- transport: Shared HTTP client
- classifier: Status and body classification
- anilibria_service: Endpoint operations and composition root
"""

from services import anilibria_service, classifier, config_store, transport
from services.anilibria_service import AniLibriaService, create_service

__all__ = [
    "anilibria_service",
    "classifier",
    "config_store",
    "transport",
    "AniLibriaService",
    "create_service",
]
