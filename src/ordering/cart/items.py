"""Cart item management: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class AddCartItem:
    """Add a product snapshot to the customer's cart."""

    customer_id = Identifier(required=True)
    product_id = Identifier()
    name = String(required=True, max_length=255, sanitize=False)
    image = String(max_length=1000)
    category = String(max_length=100)
    description = Text()
    original_price = Float(required=True, min_value=0.0)
    discount_price = Float(required=True, min_value=0.0)
    quantity = Integer(default=1)


@ordering.command(part_of="Cart")
class UpdateCartQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True)


@ordering.command(part_of="Cart")
class RemoveCartItem:
    customer_id = Identifier(required=True)
    name = String(required=True, max_length=255, sanitize=False)


@ordering.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddCartItem)
    def add_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        item = cart.add_item(
            name=command.name,
            original_price=command.original_price,
            discount_price=command.discount_price,
            quantity=command.quantity,
            image=command.image,
            category=command.category,
            description=command.description,
            product_id=command.product_id,
        )
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        cart.update_quantity(item_id=command.item_id, quantity=command.quantity)
        repo.add(cart)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        cart.remove_item(name=command.name)
        repo.add(cart)
