"""Application service: List Products use case (query).

Compiles the criteria into a query description and hands it to the
catalog; the catalog does the actual filtering.
"""

from __future__ import annotations

import math

from storefront.application.dto import ProductPageDTO, ProductSummaryDTO
from storefront.domain.model.filters import FilterCriteria
from storefront.domain.repository.product_catalog import ProductCatalog
from storefront.domain.service.query_compiler import compile_query


class ListProductsHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, criteria: FilterCriteria) -> ProductPageDTO:
        page = self._catalog.fetch_page(compile_query(criteria))
        return ProductPageDTO(
            products=[
                ProductSummaryDTO(
                    id=p.id,
                    name=p.name,
                    brand=p.brand,
                    price=str(p.price),
                    stock=p.stock,
                )
                for p in page.products
            ],
            total_count=page.total_count,
            total_pages=math.ceil(page.total_count / criteria.page_size),
            current_page=criteria.page,
        )
