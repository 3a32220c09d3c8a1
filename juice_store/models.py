from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Fruit(ABC):
    name: str
    unit_price: int  # 100g 당 가격

    @abstractmethod
    def blend(self) -> str:
        """과일을 갈았을 때의 설명 문구."""


@dataclass(frozen=True)
class Strawberry(Fruit):
    name: str = field(default="딸기", init=False)
    unit_price: int = field(default=1000, init=False)

    def blend(self) -> str:
        return "새콤한 딸기"


@dataclass(frozen=True)
class Banana(Fruit):
    name: str = field(default="바나나", init=False)
    unit_price: int = field(default=700, init=False)

    def blend(self) -> str:
        return "부드러운 바나나"


# 새 과일은 Fruit 를 상속하기만 하면 되고 JuiceMaker 는 그대로
# 이름과 가격은 고정값이라 생성자 인자로 받지 않는다
@dataclass(frozen=True)
class Mango(Fruit):
    name: str = field(default="망고", init=False)
    unit_price: int = field(default=1500, init=False)

    def blend(self) -> str:
        return "달콤한 망고"


@dataclass(frozen=True)
class Order:
    total_amount: float

    def __post_init__(self):
        # 정수 금액도 float 로 보관 (출력: 5000.0)
        object.__setattr__(self, "total_amount", float(self.total_amount))
