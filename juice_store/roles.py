from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .models import Fruit
from .pricing import JuiceMaker
from .settings import CURRENCY_SUFFIX


# 고객용 기능
class CustomerActions(ABC):
    @abstractmethod
    def order_juice(self, fruits: Sequence[Fruit]) -> str:
        ...

    @abstractmethod
    def check_price(self, fruits: Sequence[Fruit]) -> str:
        ...


# 관리자용 기능. 고객은 알 필요가 없다
class AdminActions(ABC):
    @abstractmethod
    def add_fruit_to_stock(self, fruit: Fruit) -> str:
        ...


class Customer(CustomerActions):
    def __init__(self, maker: Optional[JuiceMaker] = None):
        self._maker = maker or JuiceMaker()

    def order_juice(self, fruits: Sequence[Fruit]) -> str:
        lines = [
            self._maker.blend_juice(fruits),
            f"가격: {self._maker.calculate_price(fruits)}{CURRENCY_SUFFIX}",
        ]
        text = "\n".join(lines)
        print(text)
        return text

    def check_price(self, fruits: Sequence[Fruit]) -> str:
        text = f"예상 가격: {self._maker.calculate_price(fruits)}{CURRENCY_SUFFIX}"
        print(text)
        return text


class Admin(AdminActions):
    def add_fruit_to_stock(self, fruit: Fruit) -> str:
        # 재고 저장소 없음, 확인 문구만 출력
        text = f"[관리자] {fruit.name} 재고 추가 완료."
        print(text)
        return text
