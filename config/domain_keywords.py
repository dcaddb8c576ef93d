# config/domain_keywords.py

# 데이터 라벨 -> 도메인 판별용 키워드. 선언 순서가 곧 우선순위다.
DOMAIN_TYPE_KEYWORDS = (
    ("sales", ("매출", "판매", "거래", "sales", "transaction", "주문", "order", "결제", "payment")),
    ("zone", ("zone", "구역", "좌표", "coordinate", "위치", "location")),
    ("traffic", ("동선", "traffic", "방문", "visit", "path", "이동", "movement", "person")),
    ("product", ("상품", "product", "제품", "품목", "item", "sku")),
    ("customer", ("고객", "customer", "회원", "member", "유저", "user")),
    ("inventory", ("재고", "inventory", "stock", "입고", "출고")),
)

UNKNOWN_DOMAIN = "other"

# 필수 컬럼 외에 품질 점수에 포함되는 선택 컬럼
IMPORTANT_OPTIONAL_FIELDS = frozenset(
    {"timestamp", "product_category", "total_amount", "discount"}
)
