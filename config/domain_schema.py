# config/domain_schema.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ColumnSchema:
    name: str
    type: str
    required: bool
    description: str
    examples: Tuple[str, ...] = ()

    def search_terms(self) -> Tuple[str, ...]:
        """매칭에 사용할 검색어: 컬럼명, 설명, 예시 순서."""
        return (self.name, self.description, *self.examples)


@dataclass(frozen=True)
class DataSchema:
    type: str
    columns: Tuple[ColumnSchema, ...]
    # 참고용 메타데이터. 정규화 엔진은 relations를 조회하지 않는다.
    relations: Tuple[str, ...] = ()


# 판매/거래 데이터 표준 스키마
SALES_SCHEMA = DataSchema(
    type="sales",
    columns=(
        ColumnSchema("transaction_id", "string", False, "거래 고유 ID 주문번호 order",
                     ("주문번호", "order_id", "transaction", "id")),
        ColumnSchema("timestamp", "date", False, "거래 시간 기간 날짜 date",
                     ("기간", "날짜", "date", "time", "주문시각", "timestamp")),
        ColumnSchema("product_name", "string", True, "상품명 제품명 품목 product",
                     ("상품명", "product", "item", "품목", "제품")),
        ColumnSchema("product_category", "string", False, "상품 카테고리 분류 category",
                     ("카테고리", "category", "분류")),
        ColumnSchema("price", "number", True, "판매 가격 단가 상품가격 price",
                     ("가격", "price", "단가", "상품가격", "금액")),
        ColumnSchema("quantity", "number", True, "판매 수량 건수 quantity count",
                     ("수량", "quantity", "판매건수", "count", "건수")),
        ColumnSchema("total_amount", "number", False, "총 금액 실판매금액 total amount",
                     ("총금액", "total", "실판매금액", "amount", "판매금액", "실판매")),
        ColumnSchema("discount", "number", False, "할인 금액 할인액 discount",
                     ("할인", "discount", "할인금액", "할인액")),
        ColumnSchema("tax", "number", False, "부가세 세금 tax",
                     ("부가세", "tax", "세금", "부가세액")),
        ColumnSchema("customer_id", "string", False, "고객 ID customer",
                     ("고객", "customer", "회원")),
        ColumnSchema("payment_method", "string", False, "결제 수단 payment",
                     ("결제", "payment", "결제수단")),
    ),
    relations=("customer", "product"),
)

# Zone 위치 데이터 표준 스키마
ZONE_SCHEMA = DataSchema(
    type="zone",
    columns=(
        ColumnSchema("zone_id", "string", True, "Zone 고유 ID",
                     ("zone_id", "구역ID", "구역코드")),
        ColumnSchema("zone_name", "string", True, "Zone 이름",
                     ("zone_name", "구역명", "구역이름")),
        ColumnSchema("x", "number", True, "X 좌표", ("x좌표", "coord_x", "pos_x")),
        ColumnSchema("y", "number", True, "Y 좌표", ("y좌표", "coord_y", "pos_y")),
        ColumnSchema("z", "number", False, "Z 좌표 (높이)", ("z좌표", "coord_z", "height")),
        ColumnSchema("type", "string", False, "Zone 타입 (입구, 진열대, 계산대 등)",
                     ("zone_type", "구역타입", "유형")),
        ColumnSchema("area", "number", False, "면적 (sqm)", ("area", "면적", "sqm")),
    ),
    relations=("traffic", "product"),
)

# 고객 동선 데이터 표준 스키마
TRAFFIC_SCHEMA = DataSchema(
    type="traffic",
    columns=(
        ColumnSchema("person_id", "string", True, "고객/방문자 ID",
                     ("person_id", "visitor_id", "방문자ID")),
        ColumnSchema("zones", "array", True, "방문한 Zone 순서 배열",
                     ("zones", "zone_path", "방문구역", "경로")),
        ColumnSchema("timestamp_start", "date", True, "동선 시작 시간",
                     ("start_time", "시작시간", "입장시간")),
        ColumnSchema("timestamp_end", "date", True, "동선 종료 시간",
                     ("end_time", "종료시간", "퇴장시간")),
        ColumnSchema("dwell_times", "array", False, "각 Zone 체류 시간 배열 (초)",
                     ("dwell_times", "dwell", "체류시간")),
    ),
    relations=("zone", "customer"),
)

# 상품 데이터 표준 스키마
PRODUCT_SCHEMA = DataSchema(
    type="product",
    columns=(
        ColumnSchema("product_id", "string", True, "상품 고유 ID",
                     ("product_id", "상품코드", "상품ID", "item_id")),
        ColumnSchema("product_name", "string", True, "상품명",
                     ("product_name", "상품명", "제품명", "item_name")),
        ColumnSchema("category", "string", True, "카테고리", ("category", "카테고리", "분류")),
        ColumnSchema("brand", "string", False, "브랜드", ("brand", "브랜드")),
        ColumnSchema("price", "number", True, "판매 가격", ("price", "가격", "판매가")),
        ColumnSchema("cost", "number", False, "원가", ("cost", "원가", "매입가")),
        ColumnSchema("sku", "string", False, "SKU 코드", ("sku", "sku_code", "바코드")),
    ),
    relations=("sales", "inventory"),
)

# 고객 데이터 표준 스키마
CUSTOMER_SCHEMA = DataSchema(
    type="customer",
    columns=(
        ColumnSchema("customer_id", "string", True, "고객 고유 ID",
                     ("customer_id", "고객ID", "회원번호", "member_id")),
        ColumnSchema("segment", "string", False, "고객 세그먼트", ("segment", "세그먼트", "등급")),
        ColumnSchema("join_date", "date", False, "가입일", ("join_date", "가입일", "signup_date")),
        ColumnSchema("total_purchases", "number", False, "총 구매 횟수",
                     ("total_purchases", "구매횟수", "purchase_count")),
        ColumnSchema("lifetime_value", "number", False, "생애 가치 (LTV)",
                     ("lifetime_value", "ltv", "생애가치")),
    ),
    relations=("sales", "traffic"),
)

# 재고 데이터 표준 스키마
INVENTORY_SCHEMA = DataSchema(
    type="inventory",
    columns=(
        ColumnSchema("product_id", "string", True, "상품 ID",
                     ("product_id", "상품코드", "상품ID", "sku")),
        ColumnSchema("timestamp", "date", True, "재고 기록 시간",
                     ("timestamp", "date", "날짜", "기록시간")),
        ColumnSchema("stock_level", "number", True, "재고 수량",
                     ("stock_level", "재고수량", "stock")),
        ColumnSchema("reorder_point", "number", False, "재주문 포인트",
                     ("reorder_point", "재주문점", "안전재고")),
        ColumnSchema("warehouse_location", "string", False, "창고 위치",
                     ("warehouse_location", "창고", "warehouse")),
    ),
    relations=("product",),
)

CANONICAL_SCHEMAS: Dict[str, DataSchema] = {
    schema.type: schema
    for schema in (
        SALES_SCHEMA,
        ZONE_SCHEMA,
        TRAFFIC_SCHEMA,
        PRODUCT_SCHEMA,
        CUSTOMER_SCHEMA,
        INVENTORY_SCHEMA,
    )
}


def get_schema(domain: str) -> Optional[DataSchema]:
    return CANONICAL_SCHEMAS.get(domain)
