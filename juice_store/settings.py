# 데모 전체에서 쓰는 고정 문구와 상수

# 주스 가격은 100g 단위로 계산
UNIT_WEIGHT_GRAMS = 100

JUICE_HEADER = "주스 완성: "
CURRENCY_SUFFIX = "원"

VIP_DISCOUNT_RATE = 0.1

# 주문 성공 시 차감하는 재고 품목 (juice)
STOCK_ITEM = "주스"

ORDER_SUCCESS_MESSAGE = "주문이 성공적으로 완료되었습니다."
ORDER_FAILURE_MESSAGE = "주문 결제에 실패했습니다."
