LAYERS = ("unit", "contract", "integration", "e2e")


def pytest_configure(config):
    """계층 마커 등록"""
    config.addinivalue_line("markers", "unit: 클래스 또는 함수 단위")
    config.addinivalue_line("markers", "contract: 인터페이스 형태와 치환 가능성")
    config.addinivalue_line("markers", "integration: OrderService 와 협력 객체 연동")
    config.addinivalue_line("markers", "e2e: 데모 프로그램 전체 출력")


def pytest_collection_modifyitems(config, items):
    """unit -> contract -> integration -> e2e 순으로 정렬"""
    def item_priority(item):
        markers = [m.name for m in item.iter_markers()]
        for rank, layer in enumerate(LAYERS):
            if layer in markers:
                return rank
        return len(LAYERS)

    items.sort(key=item_priority)
