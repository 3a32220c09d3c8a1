from abc import ABC, abstractmethod


class Notifier(ABC):
    @abstractmethod
    def send_notification(self, message: str) -> None:
        ...


class SmsNotifier(Notifier):
    def send_notification(self, message: str) -> None:
        print(f"[SMS 발송] {message}")


class EmailNotifier(Notifier):
    def send_notification(self, message: str) -> None:
        print(f"[Email 발송] {message}")
