from abc import ABC, abstractmethod

from .settings import CURRENCY_SUFFIX


class PaymentProcessor(ABC):
    @abstractmethod
    def process_payment(self, amount: float) -> bool:
        """amount 를 결제하고 성공 여부를 반환한다."""


class CreditCardProcessor(PaymentProcessor):
    def process_payment(self, amount: float) -> bool:
        print(f"[신용카드] {amount}{CURRENCY_SUFFIX} 결제 성공.")
        return True


class BankTransferProcessor(PaymentProcessor):
    def process_payment(self, amount: float) -> bool:
        print(f"[계좌이체] {amount}{CURRENCY_SUFFIX} 입금 확인.")
        return True
