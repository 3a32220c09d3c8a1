import logging
from typing import List

from .models import Banana, Mango, Order, Strawberry
from .notifiers import SmsNotifier
from .payments import CreditCardProcessor
from .pricing import NoDiscount, VipDiscount
from .roles import Admin, Customer
from .service import OrderService, StockManager


def run_juice_store_demo() -> None:
    customer = Customer()
    customer.order_juice([Strawberry(), Banana()])
    print("---")

    # 망고가 추가돼도 Customer/JuiceMaker 코드는 그대로
    customer.order_juice([Mango(), Banana()])
    print("---")

    Admin().add_fruit_to_stock(Mango())


def run_order_demo() -> List[bool]:
    # BankTransferProcessor 로 바꿔도 OrderService 는 수정하지 않는다
    service = OrderService(CreditCardProcessor(), SmsNotifier(), StockManager())

    results = []
    print("--- VIP 회원 주문 ---")
    results.append(service.place_order(Order(10000), VipDiscount()))

    print("\n--- 일반 회원 주문 ---")
    results.append(service.place_order(Order(5000), NoDiscount()))
    return results


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    run_juice_store_demo()
    print()
    run_order_demo()


if __name__ == "__main__":
    main()
