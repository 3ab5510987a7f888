"""In-memory cart engine with automatic threshold gift."""
import time
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from giftcart.errors import (
    ERROR_GIFT_ENGINE_MANAGED,
    ERROR_GIFT_ID_COLLISION,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PRODUCT_NOT_IN_CART,
)
from giftcart.logging import get_logger, sanitize_string_for_logging
from giftcart.services.money import Amount
from .catalog import Catalog, DEFAULT_GIFT
from .models import CartLine, CartView, Product
from .notice import DEFAULT_NOTICE_SECONDS, GiftNotice, Scheduler
from .promotion import (
    GiftDecision,
    GiftPolicy,
    evaluate,
    progress_percent,
    remaining_amount,
    subtotal,
)

logger = get_logger(__name__)

DEFAULT_THRESHOLD = Decimal("1000")

CartListener = Callable[[CartView], None]


class CartEngine:
    """
    Owns the cart state and keeps the gift line consistent with it.

    Every mutating operation ends by re-running the gift rule, so callers
    only ever observe steady states:
    - below threshold, no gift line
    - at or above threshold, exactly one gift line (last in the cart)

    Listeners registered with ``subscribe`` receive a fresh ``CartView``
    after each operation that changed the cart and when the gift banner
    expires. With no running event loop the banner still hides once
    ``clock`` passes its deadline, but listeners are not told about it.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        threshold: Amount = DEFAULT_THRESHOLD,
        gift: Product = DEFAULT_GIFT,
        gift_notification_duration: float = DEFAULT_NOTICE_SECONDS,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.policy = GiftPolicy(threshold=threshold, gift=gift)
        if gift.id in self.catalog:
            raise ValueError(f"{ERROR_GIFT_ID_COLLISION}: {gift.id}")

        self._lines: List[CartLine] = []
        self._listeners: List[CartListener] = []
        self._notice = GiftNotice(
            duration=gift_notification_duration,
            scheduler=scheduler,
            on_expire=self._publish,
            clock=clock,
        )

    @property
    def threshold(self) -> Decimal:
        return self.policy.threshold

    @property
    def gift(self) -> Product:
        return self.policy.gift

    @property
    def gift_message_visible(self) -> bool:
        """True while the "gift granted" banner should be shown."""
        return self._notice.visible

    # ==================== MUTATIONS ====================

    def add_product(self, product: Product) -> bool:
        """
        Add one unit of a product.

        Increments the existing line or appends a new one. Returns False
        only when asked to add the gift itself, which is ignored.
        """
        if product.id == self.gift.id:
            logger.warning(f"{ERROR_GIFT_ENGINE_MANAGED}: add_product({product.id})")
            return False

        index = self._index_of(product.id)
        if index is None:
            self._lines.append(CartLine.for_product(product))
        else:
            line = self._lines[index]
            self._lines[index] = CartLine(
                id=line.id, name=line.name, price=line.price, quantity=line.quantity + 1
            )

        self._after_mutation()
        return True

    def add_product_by_id(self, product_id: int) -> bool:
        """Add one unit of a catalog product; unknown ids are ignored."""
        product = self.catalog.get(product_id)
        if product is None:
            logger.debug(
                f"{ERROR_PRODUCT_NOT_FOUND}: {sanitize_string_for_logging(product_id)}"
            )
            return False
        return self.add_product(product)

    def change_quantity(self, product_id: int, delta: int) -> bool:
        """
        Shift a line's quantity by ``delta``, clamping at zero.

        A line reaching zero is removed. Unknown ids, a zero delta and
        attempts to touch the gift line leave the cart unchanged.
        Returns True if the cart changed.
        """
        if product_id == self.gift.id:
            logger.warning(f"{ERROR_GIFT_ENGINE_MANAGED}: change_quantity({product_id}, {delta})")
            return False
        if delta == 0:
            return False

        index = self._index_of(product_id)
        if index is None:
            logger.debug(
                f"{ERROR_PRODUCT_NOT_IN_CART}: {sanitize_string_for_logging(product_id)}"
            )
            return False

        line = self._lines[index]
        new_quantity = max(0, line.quantity + delta)
        if new_quantity == 0:
            del self._lines[index]
        else:
            self._lines[index] = CartLine(
                id=line.id, name=line.name, price=line.price, quantity=new_quantity
            )

        self._after_mutation()
        return True

    # ==================== QUERIES ====================

    def get_subtotal(self) -> Decimal:
        """Sum of price x quantity over all lines (gift contributes 0)."""
        return subtotal(self._lines)

    def get_progress(self, threshold: Optional[Amount] = None) -> Decimal:
        """Percentage of the threshold reached, capped at 100."""
        limit = self.threshold if threshold is None else threshold
        return progress_percent(self.get_subtotal(), limit)

    def get_remaining(self, threshold: Optional[Amount] = None) -> Decimal:
        """Amount still needed to unlock the gift (0 once reached)."""
        limit = self.threshold if threshold is None else threshold
        return remaining_amount(self.get_subtotal(), limit)

    def has_gift(self) -> bool:
        """True if the gift line is in the cart."""
        return self._index_of(self.gift.id) is not None

    def snapshot(self) -> Tuple[CartLine, ...]:
        """Current lines in display order."""
        return tuple(self._lines)

    def view(self) -> CartView:
        """Derived view for renderers."""
        return CartView(
            lines=self.snapshot(),
            subtotal=self.get_subtotal(),
            threshold=self.threshold,
            progress=self.get_progress(),
            remaining=self.get_remaining(),
            gift_id=self.gift.id,
            gift_message_visible=self.gift_message_visible,
        )

    # ==================== SUBSCRIPTIONS ====================

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ==================== INTERNALS ====================

    def _index_of(self, product_id: int) -> Optional[int]:
        for index, line in enumerate(self._lines):
            if line.id == product_id:
                return index
        return None

    def _after_mutation(self) -> None:
        """Bring the gift line in line with the subtotal, then publish."""
        decision = evaluate(self._lines, self.policy)

        if decision is GiftDecision.GRANT:
            self._lines.append(self.policy.gift_line())
            self._notice.show()
            logger.info(f"Gift granted: {self.gift.name} (subtotal {self.get_subtotal()})")
        elif decision is GiftDecision.REVOKE:
            self._lines = [line for line in self._lines if line.id != self.gift.id]
            logger.info(f"Gift revoked: {self.gift.name} (subtotal {self.get_subtotal()})")

        self._publish()

    def _publish(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            listener(view)
