"""Read side for the catalogue."""

from protean.utils.globals import current_domain

from catalogue.product.product import Product


def product_view(product):
    return {
        "product_id": str(product.id),
        "title": product.title,
        "description": product.description,
        "price": product.price,
        "category": product.category,
        "image": product.image,
        "rating": {
            "rate": product.rating.rate if product.rating else 0.0,
            "count": product.rating.count if product.rating else 0,
        },
        "ingredients": list(product.ingredients or []),
        "nutrition": dict(product.nutrition or {}),
    }


def list_products(category=None, search=None, min_price=None, max_price=None, min_rating=None):
    products = current_domain.repository_for(Product).search(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
    )
    return [product_view(p) for p in products]


def get_product(product_id):
    return product_view(current_domain.repository_for(Product).get_product(product_id))
