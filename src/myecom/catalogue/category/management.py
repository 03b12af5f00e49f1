"""Category management — command and handler."""

from protean import handle
from protean.fields import Boolean, String, Text
from protean.utils.globals import current_domain

from myecom.catalogue.category.category import Category
from myecom.domain import shop
from myecom.exceptions import InvalidRequestError


@shop.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    active: Boolean(default=True)


@shop.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        name = command.name.strip()
        if repo.find_by_name(name) is not None:
            raise InvalidRequestError(f"Esiste già una categoria con nome: {name}")

        category = Category.create(
            name=name,
            description=command.description,
            active=command.active,
        )
        repo.add(category)
        return str(category.id)
