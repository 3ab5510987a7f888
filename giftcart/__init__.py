"""giftcart - shopping cart state engine with a spend-threshold free gift."""

__version__ = "0.1.0"
