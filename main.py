import argparse
import json
import logging
import sys
from pathlib import Path

from config.settings import load_settings
from core.import_engine import ImportEngine
from loaders.record_loader import RecordLoader


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSV/XLSX/JSON 데이터를 표준 리테일 스키마로 정규화합니다."
    )
    parser.add_argument("files", nargs="+", help="정규화할 데이터 파일")
    parser.add_argument("--type", dest="data_type", help="데이터 라벨 (예: 매출, 재고)")
    parser.add_argument("--output", help="결과 JSON 저장 경로 (기본: stdout)")
    parser.add_argument(
        "--summary-only", action="store_true", help="데이터셋 요약만 출력"
    )
    return parser


def main(argv=None):
    settings = load_settings()
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_type = args.data_type or settings.default_type
    sources = [(Path(f), data_type) for f in args.files]
    engine = ImportEngine(RecordLoader(encoding=settings.csv_encoding))
    try:
        result = engine.run(sources)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"[batch] import failed: {exc}")

    payload = {"generated_at": result["generated_at"], "summary": result["summary"]}
    if not args.summary_only:
        payload["datasets"] = result["datasets"]
    text = json.dumps(payload, ensure_ascii=False, indent=2, default=str)

    output = args.output or settings.output_path
    if output:
        target = Path(output)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        print(f"[batch] result saved to {target}", file=sys.stderr)
    else:
        print(text)


if __name__ == "__main__":
    main()
