from dataclasses import dataclass, field
from typing import List

from juice_store.models import Banana, Fruit, Mango, Order, Strawberry
from juice_store.notifiers import Notifier
from juice_store.payments import PaymentProcessor
from juice_store.service import StockManager


@dataclass(frozen=True)
class Defaults:
    order_amount: float = 10000.0


FRUIT_TYPES = (Strawberry, Banana, Mango)


def make_fruits(n: int = 2) -> List[Fruit]:
    # 딸기, 바나나, 망고 순으로 반복
    return [FRUIT_TYPES[i % len(FRUIT_TYPES)]() for i in range(n)]


def make_order(amount: float = Defaults.order_amount) -> Order:
    return Order(total_amount=amount)


@dataclass
class RecordingNotifier(Notifier):
    messages: List[str] = field(default_factory=list)

    def send_notification(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class RecordingStockManager(StockManager):
    items: List[str] = field(default_factory=list)

    def decrease_stock(self, item: str) -> None:
        self.items.append(item)


@dataclass
class DecliningProcessor(PaymentProcessor):
    charged: List[float] = field(default_factory=list)

    def process_payment(self, amount: float) -> bool:
        self.charged.append(amount)
        return False
