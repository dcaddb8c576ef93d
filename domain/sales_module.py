from typing import Any, Dict

from .base_module import BaseDomainModule


class SalesDomainModule(BaseDomainModule):
    domain_name = "sales"

    def derive(self, record: Dict[str, Any], index: int, epoch_millis: int) -> Dict[str, Any]:
        # 같은 밀리초 안의 다른 호출과는 겹칠 수 있다. 호출 내에서만 고유.
        if not record.get("transaction_id"):
            record["transaction_id"] = f"TXN_{epoch_millis}_{index}"

        price = record.get("price")
        quantity = record.get("quantity")
        if not record.get("total_amount") and price and quantity:
            record["total_amount"] = price * quantity
        return record
