"""Product creation — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from myecom.catalogue.category.category import Category
from myecom.catalogue.product.product import Product
from myecom.domain import shop
from myecom.exceptions import InvalidRequestError


@shop.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=200)
    description: Text()
    price: String(required=True, max_length=20)
    stock: Integer(required=True, min_value=0)
    image_url: String(max_length=500)
    brand: String(max_length=100)
    category_id: Identifier(required=True)
    active: Boolean(default=True)


@shop.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        try:
            current_domain.repository_for(Category).get(command.category_id)
        except ObjectNotFoundError:
            raise InvalidRequestError("Categoria non trovata")

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            image_url=command.image_url,
            brand=command.brand,
            category_id=command.category_id,
            active=command.active,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
