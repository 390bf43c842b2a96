"""Cart manager service."""
from datetime import datetime, timezone
from typing import Optional

from shopcart.auth.session import SessionStore, get_session_store
from shopcart.errors import (
    CartError,
    EmptyCart,
    InvalidQuantity,
    ItemNotFound,
    OutOfStock,
    ProductNotFound,
    Unauthenticated,
    ERROR_LOGIN_TO_ADD,
    ERROR_LOGIN_TO_VIEW,
)
from shopcart.logging import get_logger, sanitize_id_for_logging
from shopcart.services.catalog import ProductCatalog, get_catalog
from shopcart.services.money import to_float
from .models import CartItem, Cart
from .storage import CartStorage

logger = get_logger(__name__)


class CartManager:
    """
    Manages one shopping cart per session.

    Features:
    - POST-style add increments an existing line, update replaces it
    - Line quantity is kept between 1 and the product's current stock
    - Every read-modify-write runs under the session's lock
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        sessions: SessionStore,
        storage: Optional[CartStorage] = None,
    ):
        self.catalog = catalog
        self.sessions = sessions
        self.storage = storage or CartStorage()

    # ---------- helpers ----------

    def _require_session(self, session_id: Optional[str], message: str) -> str:
        if not self.sessions.is_valid(session_id):
            # Expired or revoked: whatever the session left behind goes with it
            if session_id and self.storage.purge(session_id):
                logger.info(f"Dropped cart of expired session {sanitize_id_for_logging(session_id)}")
            raise self._rejected(session_id, Unauthenticated(message))
        return session_id

    def _validate_quantity(self, session_id: str, quantity) -> int:
        # bool is an int subclass; True must not pass as 1
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise self._rejected(session_id, InvalidQuantity())
        return quantity

    @staticmethod
    def _rejected(session_id: Optional[str], error: CartError) -> CartError:
        logger.warning(
            f"Cart operation rejected for session {sanitize_id_for_logging(session_id)}: {error.message}"
        )
        return error

    async def _load(self, session_id: str) -> Cart:
        """Load the session's cart, creating an empty one on first use."""
        data = await self.storage.get(session_id)
        if data is not None:
            try:
                return Cart.from_dict(data)
            except (KeyError, TypeError, ValueError) as e:
                # Corrupted data - start over with an empty cart
                logger.warning(
                    f"Corrupted cart data for session {sanitize_id_for_logging(session_id)}: {e}"
                )
        cart = Cart(session_id=session_id)
        await self.storage.set(session_id, cart.to_dict())
        return cart

    async def _save(self, cart: Cart) -> None:
        cart.updated_at = datetime.now(timezone.utc).isoformat()
        await self.storage.set(cart.session_id, cart.to_dict())

    # ---------- operations ----------

    async def get_cart(self, session_id: Optional[str]) -> Cart:
        """Get the session's cart (possibly empty)."""
        self._require_session(session_id, ERROR_LOGIN_TO_VIEW)
        async with self.storage.lock(session_id):
            return await self._load(session_id)

    async def add_item(self, session_id: Optional[str], product_id: int, quantity: int = 1) -> Cart:
        """Add a product, incrementing the line if it is already in the cart."""
        self._require_session(session_id, ERROR_LOGIN_TO_ADD)
        self._validate_quantity(session_id, quantity)

        async with self.storage.lock(session_id):
            product = await self.catalog.get_by_id(product_id)
            if product is None:
                raise self._rejected(session_id, ProductNotFound())

            cart = await self._load(session_id)
            existing_item = cart.find(product_id)
            resulting = quantity + (existing_item.quantity if existing_item else 0)
            if resulting > product.stock:
                raise self._rejected(
                    session_id,
                    OutOfStock(requested=resulting, available=product.stock),
                )

            if existing_item:
                existing_item.quantity = resulting
                existing_item.unit_price = product.price
                existing_item.product_name = product.name
            else:
                cart.items.append(
                    CartItem(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=quantity,
                        unit_price=product.price,
                    )
                )

            await self._save(cart)

        logger.info(
            f"Added product {product_id} x{quantity} to cart {sanitize_id_for_logging(session_id)} "
            f"(line quantity {resulting})"
        )
        return cart

    async def update_item_quantity(
        self,
        session_id: Optional[str],
        product_id: int,
        new_quantity: int,
    ) -> Cart:
        """Replace the quantity of a line already in the cart."""
        self._require_session(session_id, ERROR_LOGIN_TO_VIEW)
        self._validate_quantity(session_id, new_quantity)

        async with self.storage.lock(session_id):
            cart = await self._load(session_id)
            item = cart.find(product_id)
            if item is None:
                raise self._rejected(session_id, ItemNotFound())

            product = await self.catalog.get_by_id(product_id)
            if product is None:
                raise self._rejected(session_id, ProductNotFound())
            if new_quantity > product.stock:
                raise self._rejected(
                    session_id,
                    OutOfStock(requested=new_quantity, available=product.stock),
                )

            item.quantity = new_quantity
            item.unit_price = product.price
            await self._save(cart)

        logger.info(
            f"Set product {product_id} to x{new_quantity} in cart {sanitize_id_for_logging(session_id)}"
        )
        return cart

    async def remove_item(self, session_id: Optional[str], product_id: int) -> Cart:
        """Remove a line. Removing the last line leaves an empty cart."""
        self._require_session(session_id, ERROR_LOGIN_TO_VIEW)

        async with self.storage.lock(session_id):
            cart = await self._load(session_id)
            if cart.find(product_id) is None:
                raise self._rejected(session_id, ItemNotFound())

            cart.items = [item for item in cart.items if item.product_id != product_id]
            await self._save(cart)

        logger.info(f"Removed product {product_id} from cart {sanitize_id_for_logging(session_id)}")
        return cart

    async def clear_cart(self, session_id: Optional[str]) -> Cart:
        """Remove every line from the session's cart."""
        self._require_session(session_id, ERROR_LOGIN_TO_VIEW)

        async with self.storage.lock(session_id):
            cart = await self._load(session_id)
            cart.items = []
            await self._save(cart)

        logger.info(f"Cleared cart {sanitize_id_for_logging(session_id)}")
        return cart

    async def checkout(self, session_id: Optional[str]) -> Cart:
        """
        Hand the cart over to checkout.

        Returns the lines as they were and resets the session's cart.
        Payment is handled elsewhere.
        """
        self._require_session(session_id, ERROR_LOGIN_TO_VIEW)

        async with self.storage.lock(session_id):
            cart = await self._load(session_id)
            if cart.is_empty:
                raise self._rejected(session_id, EmptyCart())
            await self.storage.delete(session_id)

        logger.info(
            f"Cart {sanitize_id_for_logging(session_id)} handed to checkout "
            f"({cart.total_items} items, subtotal {cart.subtotal})"
        )
        return cart

    async def end_session(self, session_id: str) -> None:
        """Drop the cart of a session that has ended."""
        async with self.storage.lock(session_id):
            await self.storage.delete(session_id)
        self.storage.forget(session_id)
        logger.info(f"Dropped cart for ended session {sanitize_id_for_logging(session_id)}")

    def purge_expired_sessions(self) -> int:
        """Drop carts and locks of sessions that are no longer valid.

        Catches abandoned sessions that never come back after expiring.
        Returns the number of sessions purged.
        """
        self.sessions.purge_expired()
        purged = 0
        for session_id in self.storage.session_ids():
            if not self.sessions.is_valid(session_id):
                self.storage.purge(session_id)
                purged += 1
        if purged:
            logger.info(f"Purged {purged} expired cart session(s)")
        return purged

    async def get_cart_summary(self, session_id: Optional[str]) -> dict:
        """Get a plain summary of the cart (header counter, mini-cart)."""
        cart = await self.get_cart(session_id)

        if cart.is_empty:
            return {
                "is_empty": True,
                "total_items": 0,
                "items": [],
                "subtotal": 0.0,
            }

        return {
            "is_empty": False,
            "total_items": cart.total_items,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": to_float(item.unit_price),
                    "total": to_float(item.total_price),
                }
                for item in cart.items
            ],
            "subtotal": to_float(cart.subtotal),
        }


# Singleton instance
_cart_manager: Optional[CartManager] = None


def get_cart_manager() -> CartManager:
    """Get CartManager singleton."""
    global _cart_manager
    if _cart_manager is None:
        _cart_manager = CartManager(catalog=get_catalog(), sessions=get_session_store())
    return _cart_manager
