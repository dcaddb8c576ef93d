import copy
import unittest
from datetime import datetime, timezone

import pandas as pd

from normalization.normalization_layer import (
    NormalizationLayer,
    normalize_data,
    normalize_multiple_datasets,
)

FIXED_NOW = datetime(2025, 6, 11, 9, 0, tzinfo=timezone.utc)


class NormalizeSalesTest(unittest.TestCase):
    def setUp(self):
        self.raw = [{"상품명": "우유", "가격": "2500", "수량": "3"}]

    def test_korean_sales_columns_are_mapped_and_derived(self):
        result = normalize_data(self.raw, "매출")
        self.assertEqual(result.schema_type, "sales")
        self.assertEqual(result.original_columns, ["상품명", "가격", "수량"])

        record = result.mapped_data[0]
        self.assertEqual(record["product_name"], "우유")
        self.assertEqual(record["price"], 2500)
        self.assertEqual(record["quantity"], 3)
        self.assertEqual(record["total_amount"], 7500)
        self.assertTrue(record["transaction_id"].startswith("TXN_"))
        self.assertEqual(record["_original"], self.raw[0])

        metadata = result.metadata
        self.assertEqual(metadata.total_records, 1)
        self.assertEqual(
            metadata.column_mappings,
            {"product_name": "상품명", "price": "가격", "quantity": "수량"},
        )
        self.assertAlmostEqual(metadata.quality_score, 3 / 7)

    def test_pinned_clock_drives_timestamp_and_transaction_ids(self):
        result = normalize_data(self.raw * 2, "매출", now=FIXED_NOW)
        millis = int(FIXED_NOW.timestamp() * 1000)
        self.assertEqual(result.metadata.normalized_at, "2025-06-11T09:00:00.000Z")
        self.assertEqual(
            [r["transaction_id"] for r in result.mapped_data],
            [f"TXN_{millis}_0", f"TXN_{millis}_1"],
        )

    def test_missing_required_values_are_null(self):
        raw = self.raw + [{"상품명": "빵"}]
        second = normalize_data(raw, "매출").mapped_data[1]
        self.assertEqual(second["product_name"], "빵")
        self.assertIsNone(second["price"])
        self.assertIsNone(second["quantity"])
        self.assertNotIn("total_amount", second)

    def test_malformed_value_degrades_to_null(self):
        raw = [{"상품명": "우유", "가격": "abc", "수량": "3"}]
        with self.assertLogs("normalization.type_normalizer", level="WARNING"):
            record = normalize_data(raw, "매출").mapped_data[0]
        self.assertIsNone(record["price"])
        self.assertNotIn("total_amount", record)

    def test_input_records_are_not_mutated(self):
        raw = [{"상품명": "우유", "가격": "2500", "zones[0]": "A"}]
        snapshot = copy.deepcopy(raw)
        normalize_data(raw, "매출")
        self.assertEqual(raw, snapshot)


class NormalizeEdgeCasesTest(unittest.TestCase):
    def test_array_columns_are_merged_before_mapping(self):
        raw = [{"zones[0]": "A", "zones[1]": "B", "name": "path1"}]
        result = normalize_data(raw, "고객 동선")
        self.assertEqual(result.schema_type, "traffic")
        self.assertEqual(result.original_columns, ["name", "zones"])
        record = result.mapped_data[0]
        self.assertEqual(record["zones"], ["A", "B"])
        self.assertIsNone(record["person_id"])
        self.assertEqual(record["_original"], {"zones": ["A", "B"], "name": "path1"})
        self.assertAlmostEqual(result.metadata.quality_score, 0.25)

    def test_empty_input(self):
        result = normalize_data([], "아무거나")
        self.assertEqual(result.schema_type, "아무거나")
        self.assertEqual(result.mapped_data, [])
        self.assertEqual(result.original_columns, [])
        self.assertEqual(result.metadata.quality_score, 0)
        self.assertEqual(result.metadata.total_records, 0)
        self.assertEqual(result.metadata.column_mappings, {})

    def test_unknown_domain_passes_records_through(self):
        raw = [{"a[0]": 1, "a[1]": 2, "foo": "bar"}, {"foo": "baz"}]
        result = normalize_data(raw, "xyz_foo")
        self.assertEqual(result.schema_type, "other")
        self.assertEqual(result.mapped_data, [{"foo": "bar", "a": [1, 2]}, {"foo": "baz"}])
        self.assertEqual(result.metadata.quality_score, 0.5)
        self.assertEqual(result.metadata.column_mappings, {})

    def test_non_mapping_record_is_a_contract_error(self):
        with self.assertRaises(TypeError):
            normalize_data([{"상품명": "우유"}, "not a record"], "매출")

    def test_dataframe_input(self):
        df = pd.DataFrame(
            [
                {"product_id": "P1", "product_name": "우유", "category": "유제품", "price": 2500.0},
                {"product_id": "P2", "product_name": "빵", "category": None, "price": None},
            ]
        )
        result = NormalizationLayer().normalize(df, "상품 마스터")
        self.assertEqual(result.schema_type, "product")
        first, second = result.mapped_data
        self.assertEqual(first["price"], 2500)
        self.assertEqual(first["category"], "유제품")
        self.assertIsNone(second["price"])
        self.assertIsNone(second["category"])
        self.assertEqual(result.metadata.quality_score, 1.0)


class NormalizeInvariantsTest(unittest.TestCase):
    DATASETS = [
        ([{"상품명": "우유", "가격": "2500", "수량": "3", "메모": "x"}], "판매 데이터"),
        ([{"상품코드": "P1", "날짜": "2025-01-01", "재고수량": "10"}], "재고"),
        ([{"zone_id": "Z1", "zone_name": "입구", "좌표": "1"}], "zone layout"),
        ([{"회원번호": "C1", "가입일": 45000}, {"회원번호": "C2"}], "고객 명단"),
        ([{"foo": 1}], "기타"),
    ]

    def test_invariants_hold(self):
        for raw, label in self.DATASETS:
            result = normalize_data(raw, label)
            self.assertEqual(len(result.mapped_data), len(raw), label)
            self.assertEqual(result.metadata.total_records, len(raw), label)
            self.assertGreaterEqual(result.metadata.quality_score, 0, label)
            self.assertLessEqual(result.metadata.quality_score, 1, label)
            for raw_col in result.metadata.column_mappings.values():
                self.assertIn(raw_col, result.original_columns, label)

    def test_renormalizing_originals_is_idempotent(self):
        for raw, label in self.DATASETS[:4] + [
            ([{"상품명": "우유", "opts[0][0]": "a", "tags[0]": "x"}], "매출"),
        ]:
            first = normalize_data(raw, label, now=FIXED_NOW)
            originals = [record["_original"] for record in first.mapped_data]
            second = normalize_data(originals, label, now=FIXED_NOW)
            self.assertEqual(second.mapped_data, first.mapped_data, label)
            self.assertEqual(
                second.metadata.column_mappings, first.metadata.column_mappings, label
            )


class NormalizeMultipleDatasetsTest(unittest.TestCase):
    def test_keys_follow_index_and_label(self):
        result = normalize_multiple_datasets(
            [
                {"raw_data": [{"상품명": "우유", "가격": "2500", "수량": "3"}], "data_type": "매출"},
                {"raw_data": [], "data_type": "xyz"},
            ]
        )
        self.assertEqual(list(result), ["dataset_0_매출", "dataset_1_xyz"])
        self.assertEqual(result["dataset_0_매출"].schema_type, "sales")
        self.assertEqual(result["dataset_1_xyz"].metadata.total_records, 0)

    def test_to_dict_shape(self):
        data = normalize_data([{"상품명": "우유"}], "매출").to_dict()
        self.assertEqual(
            set(data), {"schema_type", "original_columns", "mapped_data", "metadata"}
        )
        self.assertEqual(
            set(data["metadata"]),
            {"total_records", "normalized_at", "column_mappings", "quality_score"},
        )


if __name__ == "__main__":
    unittest.main()
