"""Customer directory: display name and email per customer id.

Entries are maintained by the upstream session layer and read when orders
are listed or when a customer has to be notified.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from ordering.domain import ordering


@ordering.aggregate
class Customer:
    customer_id = Identifier(identifier=True, required=True)
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    updated_at = DateTime()

    @invariant.post
    def email_must_look_like_an_address(self):
        local_part, _, domain_part = (self.email or "").partition("@")
        if not local_part or "." not in domain_part or " " in self.email:
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, customer_id, name, email):
        return cls(customer_id=customer_id, name=name, email=email, updated_at=datetime.now(UTC))

    def update_contact(self, name, email):
        self.name = name
        self.email = email
        self.updated_at = datetime.now(UTC)
