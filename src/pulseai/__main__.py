import argparse
import json
import sys
from pathlib import Path

from .exceptions import UploadValidationError
from .logging import set_log_level
from .parser import decode_upload, validate_csv_upload
from .service import analyze_capture, health, quick_analyze


def main(argv=None):
    parser = argparse.ArgumentParser(description="Logic analyzer capture utility")
    parser.add_argument("--log-level", help="override PULSEAI_LOG_LEVEL for this run")
    sub = parser.add_subparsers(dest="cmd", required=True)
    analyze_cmd = sub.add_parser("analyze", help="analyze a CSV capture")
    analyze_cmd.add_argument("csv")
    analyze_cmd.add_argument("--no-ai", action="store_true", help="skip the AI backend")
    analyze_cmd.add_argument("--quick", action="store_true", help="short AI summary of the first lines")
    analyze_cmd.add_argument("--json", action="store_true", help="print the result as JSON")
    sub.add_parser("health", help="print service status")
    args = parser.parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    if args.cmd == "health":
        print(json.dumps(health(), indent=2))
        return 0

    path = Path(args.csv)
    try:
        data = path.read_bytes()
    except OSError as exc:
        print(f"error: cannot read {path}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    try:
        validate_csv_upload(path.name, len(data))
    except UploadValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    content = decode_upload(data)
    if args.quick:
        outcome = quick_analyze(content, path.name, file_size=len(data))
    else:
        outcome = analyze_capture(content, path.name, file_size=len(data), use_ai=not args.no_ai)
    if args.json:
        print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(outcome.result)
        print(f"\n[source: {outcome.source}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
