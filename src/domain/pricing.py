"""
Pricing policy: what a stay costs.

price = guests × days × price per guest × (breakfast multiplier, if any)

Money is Decimal rounded to cents, so two identical requests always
produce the same price.
"""

import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

DEFAULT_PRICE_PER_GUEST = Decimal("20.00")
DEFAULT_BREAKFAST_MULTIPLIER = Decimal("1.25")

_CENTS = Decimal("0.01")


def _decimal_env(name: str, default: Decimal) -> Decimal:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from None


@dataclass(frozen=True)
class PricingPolicy:
    price_per_guest: Decimal = DEFAULT_PRICE_PER_GUEST
    breakfast_multiplier: Decimal = DEFAULT_BREAKFAST_MULTIPLIER

    def __post_init__(self):
        if self.price_per_guest < 0:
            raise ValueError("price_per_guest must be non-negative")
        if self.breakfast_multiplier < 1:
            raise ValueError("breakfast_multiplier must be at least 1")

    @classmethod
    def from_env(cls) -> "PricingPolicy":
        """
        Build a policy from HOTEL_PRICE_PER_GUEST and
        HOTEL_BREAKFAST_MULTIPLIER, falling back to the defaults.
        """
        return cls(
            price_per_guest=_decimal_env("HOTEL_PRICE_PER_GUEST", DEFAULT_PRICE_PER_GUEST),
            breakfast_multiplier=_decimal_env(
                "HOTEL_BREAKFAST_MULTIPLIER", DEFAULT_BREAKFAST_MULTIPLIER
            ),
        )

    def price(self, guest_count: int, stay_days: int, breakfast_included: bool) -> Decimal:
        if guest_count < 1:
            raise ValueError(f"guest_count must be positive, got {guest_count}")
        if stay_days < 1:
            raise ValueError(f"stay_days must be positive, got {stay_days}")

        with localcontext() as ctx:
            # enough digits for the exact product, then room for the cents
            ctx.prec = (
                len(str(guest_count))
                + len(str(stay_days))
                + len(self.price_per_guest.as_tuple().digits)
                + len(self.breakfast_multiplier.as_tuple().digits)
                + 2
            )
            total = guest_count * stay_days * self.price_per_guest
            if breakfast_included:
                total *= self.breakfast_multiplier
            ctx.prec = max(ctx.prec, total.adjusted() + 3)
            return total.quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_price(guest_count: int, stay_days: int, breakfast_included: bool) -> Decimal:
    """Price a stay with the default policy."""
    return PricingPolicy().price(guest_count, stay_days, breakfast_included)
