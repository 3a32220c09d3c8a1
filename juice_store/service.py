import logging

from .models import Order
from .notifiers import Notifier
from .payments import PaymentProcessor
from .pricing import DiscountPolicy
from .settings import ORDER_FAILURE_MESSAGE, ORDER_SUCCESS_MESSAGE, STOCK_ITEM

logger = logging.getLogger("juice_store.service")


class StockManager:
    def decrease_stock(self, item: str) -> None:
        print(f"[재고 관리] {item} 재고 1 감소.")


class OrderService:
    """
    주문 한 건을 처리한다: 할인 적용 -> 결제 -> 성공 시 재고 차감과 알림,
    실패 시 실패 알림.

    결제/알림/재고 구현체는 생성자로 주입받는다. 호출 사이에 상태를 두지 않으며
    같은 주문을 두 번 넣으면 두 번 결제된다.
    """

    def __init__(self, payment_processor: PaymentProcessor, notifier: Notifier,
                 stock_manager: StockManager):
        self._payment_processor = payment_processor
        self._notifier = notifier
        self._stock_manager = stock_manager

    def place_order(self, order: Order, discount_policy: DiscountPolicy) -> bool:
        final_price = discount_policy.apply_discount(order.total_amount)
        print(f"최종 결제 금액: {final_price}")

        if self._payment_processor.process_payment(final_price):
            self._stock_manager.decrease_stock(STOCK_ITEM)
            self._notifier.send_notification(ORDER_SUCCESS_MESSAGE)
            logger.info("order placed: amount=%s final=%s", order.total_amount, final_price)
            return True

        self._notifier.send_notification(ORDER_FAILURE_MESSAGE)
        logger.info("payment declined: final=%s", final_price)
        return False
