"""Application services: cart use cases.

The cart lives on the client side of the system (a local file for the
CLI). Adding reads the catalog once to snapshot title, price and image;
every other edit is pure key/quantity bookkeeping on the saved cart.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart, CartKey
from storefront.domain.model.value_objects import Size
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


def cart_key(product_id: str, color_id: str | None = None, size: str | None = None) -> CartKey:
    return CartKey(product_id, color_id or None, Size.of(size))


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        uow_factory: Callable[[], UnitOfWork],
    ) -> None:
        self._cart_repo = cart_repo
        self._uow_factory = uow_factory

    def handle(
        self,
        product_id: str,
        color_id: str | None = None,
        size: str | None = None,
    ) -> int:
        """Add one unit and return the line's new quantity."""
        key = cart_key(product_id, color_id, size)
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} not found", identifier=product_id
                )
            if key.color_id is not None and uow.colors.get_for_product(
                key.color_id, product_id
            ) is None:
                raise EntityNotFoundError(
                    f"Color #{key.color_id} does not belong to '{product.title}'",
                    identifier=key.color_id,
                )

        cart = self._cart_repo.load()
        line = cart.add(product, key.color_id, key.size)
        self._cart_repo.save(cart)
        return line.quantity


class ChangeCartHandler:
    """Increase, decrease or remove an existing cart line.

    Naming a line that is not in the cart is an EntityNotFoundError.
    """

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def increase(self, key: CartKey) -> int:
        cart = self._load_with(key)
        cart.increase(key)
        self._cart_repo.save(cart)
        return cart.item_quantity(key)

    def decrease(self, key: CartKey) -> int:
        cart = self._load_with(key)
        cart.decrease(key)
        self._cart_repo.save(cart)
        return cart.item_quantity(key)

    def remove(self, key: CartKey) -> None:
        cart = self._load_with(key)
        cart.remove(key)
        self._cart_repo.save(cart)

    def clear(self) -> None:
        cart = self._cart_repo.load()
        cart.clear()
        self._cart_repo.save(cart)

    def _load_with(self, key: CartKey) -> Cart:
        cart = self._cart_repo.load()
        if not cart.contains(key):
            selection = f"product #{key.product_id}"
            if key.color_id is not None:
                selection += f" color #{key.color_id}"
            if key.size is not None:
                selection += f" size {key.size}"
            raise EntityNotFoundError(f"No cart line for {selection}", identifier=key.product_id)
        return cart
