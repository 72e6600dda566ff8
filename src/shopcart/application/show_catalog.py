"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from datetime import timezone

from shopcart.application.dto import CatalogLineDTO
from shopcart.domain.repository.product_catalog import ProductCatalog


class ShowCatalogHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                id=p.id,
                name=p.name,
                price=str(p.price),
                stock=p.stock,
                expires_at=(
                    p.expires_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
                    if p.expires_at is not None
                    else None
                ),
                weight=str(p.weight) if p.weight is not None else None,
            )
            for p in self._catalog.list_all()
        ]
