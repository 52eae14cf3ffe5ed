from .store import (
    Catalogue,
    CatalogueKey,
    SourceLink,
    TestLink,
    Topic,
    catalogue_key,
    load_catalogue,
)

__all__ = [
    "Catalogue",
    "CatalogueKey",
    "SourceLink",
    "TestLink",
    "Topic",
    "catalogue_key",
    "load_catalogue",
]
