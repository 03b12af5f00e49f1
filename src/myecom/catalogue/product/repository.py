from protean.utils.query import Q

from myecom.catalogue.product.product import Product
from myecom.domain import shop


@shop.repository(part_of=Product)
class ProductRepository:
    def active_page(self, page: int, size: int) -> tuple[list[Product], int]:
        """One page of active products, newest first, with the total count."""
        result = self._dao.query.filter(active=True).order_by("-created_at").offset(page * size).limit(size).all()
        return result.items, result.total

    def search_page(self, text: str, page: int, size: int) -> tuple[list[Product], int]:
        """Active products whose name or description contains ``text``, ignoring case."""
        needle = text.strip()
        result = (
            self._dao.query.filter(Q(name__icontains=needle) | Q(description__icontains=needle), active=True)
            .order_by("-created_at")
            .offset(page * size)
            .limit(size)
            .all()
        )
        return result.items, result.total
