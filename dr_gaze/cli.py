"""
Dr.Gaze — Командний рядок

Запуск:
    dr-gaze --zones ino --symptoms right_impaired_adduction
    dr-gaze --zones horizontal leftLG --symptoms nystagmus --json
    dr-gaze --list
    dr-gaze --config config.yaml --zones dark --verbose
"""

import argparse
import sys
from typing import List, Optional

from dr_gaze.config import LogLevel, get_default_config, load_config
from dr_gaze.engine import DiagnosisEngine, render_text
from dr_gaze.exceptions import ConfigError, UnknownKeyError
from dr_gaze.knowledge_base import KnowledgeBase
from dr_gaze.logger import setup_logger
from dr_gaze.schemas import SelectionRequest


EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_UNKNOWN_KEY = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dr-gaze",
        description="Dr.Gaze — ocular motility differential diagnosis"
    )
    parser.add_argument('--zones', nargs='*', default=[], help='Selected localization zones (in order)')
    parser.add_argument('--symptoms', nargs='*', default=[], help='Selected symptoms')
    parser.add_argument('--config', default=None, help='Path to YAML config')
    parser.add_argument('--json', action='store_true', help='Print JSON report')
    parser.add_argument('--list', action='store_true', help='List known zones, symptoms and diagnoses')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def _print_catalog(kb: KnowledgeBase) -> None:
    print("Zones:")
    for name in kb.zone_names:
        print(f"  {name}: {', '.join(sorted(kb.zone(name).keys()))}")
    print("\nSymptoms:")
    for name in kb.symptoms:
        print(f"  {name}")
    print("\nDiagnoses:")
    for name in kb.diagnosis_names:
        print(f"  {name}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except (OSError, ConfigError) as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.verbose:
        config.logging.level = LogLevel.DEBUG
    setup_logger("dr_gaze", config.logging)

    engine = DiagnosisEngine(config=config)

    if args.list:
        _print_catalog(engine.knowledge_base)
        return EXIT_OK

    request = SelectionRequest(zones=args.zones, symptoms=args.symptoms)

    try:
        result = engine.evaluate_request(request)
    except UnknownKeyError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_UNKNOWN_KEY

    if args.json:
        print(result.to_report().model_dump_json(indent=2))
    else:
        print(render_text(result, config.messages))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
