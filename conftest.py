import logging

import pytest

from common.factories import RecordingNotifier, RecordingStockManager
from juice_store.notifiers import EmailNotifier, SmsNotifier
from juice_store.payments import BankTransferProcessor, CreditCardProcessor
from juice_store.service import OrderService

# 커스텀 플러그인 활성화
pytest_plugins = [
    "common.plugins.markers_plugin",
]


@pytest.fixture(scope="function")
def log_capture(caplog):
    logger = logging.getLogger("juice_store.pricing")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    return caplog


def pytest_generate_tests(metafunc):
    # 같은 테스트를 모든 결제/알림 구현체로 실행
    if "processor_cls" in metafunc.fixturenames:
        metafunc.parametrize(
            "processor_cls",
            [CreditCardProcessor, BankTransferProcessor],
            ids=["credit-card", "bank-transfer"],
        )
    if "notifier_cls" in metafunc.fixturenames:
        metafunc.parametrize("notifier_cls", [SmsNotifier, EmailNotifier], ids=["sms", "email"])


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def stock():
    return RecordingStockManager()


@pytest.fixture
def order_service(notifier, stock):
    return OrderService(CreditCardProcessor(), notifier, stock)
