"""Customer directory upserts: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.domain import ordering


@ordering.command(part_of="Customer")
class UpsertCustomer:
    """Create or refresh the caller's directory entry."""

    customer_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)


@ordering.command_handler(part_of=Customer)
class CustomerDirectoryHandler:
    @handle(UpsertCustomer)
    def upsert_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get_or_none(command.customer_id)
        if customer is None:
            customer = Customer.register(
                customer_id=command.customer_id,
                name=command.name,
                email=command.email,
            )
        else:
            customer.update_contact(name=command.name, email=command.email)
        repo.add(customer)
        return str(customer.customer_id)
