import logging
from abc import ABC, abstractmethod
from typing import Sequence

from .models import Fruit
from .settings import JUICE_HEADER, UNIT_WEIGHT_GRAMS, VIP_DISCOUNT_RATE

logger = logging.getLogger("juice_store.pricing")


class JuiceMaker:
    """과일 조합으로 주스 문구와 가격을 만든다."""

    def calculate_price(self, fruits: Sequence[Fruit]) -> float:
        total = float(sum(f.unit_price for f in fruits))
        logger.debug("juice price=%s fruits=%s unit=%sg", total, len(fruits), UNIT_WEIGHT_GRAMS)
        return total

    def blend_juice(self, fruits: Sequence[Fruit]) -> str:
        return JUICE_HEADER + "".join(f"{f.blend()} " for f in fruits)


class DiscountPolicy(ABC):
    @abstractmethod
    def apply_discount(self, price: float) -> float:
        ...


class NoDiscount(DiscountPolicy):
    def apply_discount(self, price: float) -> float:
        return price


class VipDiscount(DiscountPolicy):
    discount_rate = VIP_DISCOUNT_RATE

    def apply_discount(self, price: float) -> float:
        discounted = price * (1 - self.discount_rate)
        logger.debug("vip discount: %s -> %s", price, discounted)
        return discounted
