from myecom.catalogue.category.category import Category
from myecom.domain import shop


@shop.repository(part_of=Category)
class CategoryRepository:
    def find_by_name(self, name: str) -> Category | None:
        categories = self._dao.query.filter(name=name.strip()).all().items
        return categories[0] if categories else None

    def find_active(self, limit: int = 500) -> list[Category]:
        return self._dao.query.filter(active=True).order_by("name").limit(limit).all().items
