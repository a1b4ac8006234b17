"""Product creation: command and handler."""

from protean import handle
from protean.fields import Dict, Float, List, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class AddProduct:
    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category: String(required=True, max_length=100)
    image: String(max_length=1000)
    ingredients: List(String(max_length=100))
    nutrition: Dict()


@catalogue.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            title=command.title,
            description=command.description,
            price=command.price,
            category=command.category,
            image=command.image,
            ingredients=command.ingredients,
            nutrition=command.nutrition,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
