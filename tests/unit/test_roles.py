import pytest

from juice_store.models import Banana, Mango, Strawberry
from juice_store.pricing import JuiceMaker
from juice_store.roles import Admin, Customer


@pytest.mark.unit
def test_customer_order_juice(capsys):
    text = Customer().order_juice([Strawberry(), Banana()])
    out = capsys.readouterr().out.rstrip("\n")
    assert out == text
    assert text.splitlines() == ["주스 완성: 새콤한 딸기 부드러운 바나나 ", "가격: 1700.0원"]


@pytest.mark.unit
def test_customer_check_price(capsys):
    text = Customer().check_price([Mango(), Banana()])
    assert text == "예상 가격: 2200.0원"
    assert capsys.readouterr().out.strip() == text


@pytest.mark.unit
def test_customer_uses_injected_maker(monkeypatch):
    maker = JuiceMaker()
    monkeypatch.setattr(maker, "calculate_price", lambda fruits: 42.0)
    assert Customer(maker).check_price([Mango()]) == "예상 가격: 42.0원"


@pytest.mark.unit
def test_admin_add_fruit_to_stock(capsys):
    text = Admin().add_fruit_to_stock(Mango())
    assert text == "[관리자] 망고 재고 추가 완료."
    assert capsys.readouterr().out.strip() == text
