#!/usr/bin/env python3
"""
Чтение табличного файла зависимостей, валидация и профилирование графов.

Usage:
  python -m deptree.main corpus.conll --preset dependency
  python -m deptree.main corpus.conllu --preset conllu --skip-errors --profile-out profile.json
  python -m deptree.main corpus.tsv --config config/reader.yaml
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from deptree.config import (
    SCHEMA_PRESETS, load_config, schema_from_config, options_from_config
)
from deptree.core.errors import DepTreeError, InvalidSchema, StreamReadError
from deptree.ingestion.validators import GraphValidator
from deptree.pipeline import GraphPipeline
from deptree.profiler import GraphProfiler

logger = logging.getLogger(__name__)
console = Console()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Read tab-delimited dependency annotation into sentence graphs",
    )
    parser.add_argument("input", help="Input file (one token per line, blank line between sentences)")
    parser.add_argument("--preset", choices=sorted(SCHEMA_PRESETS), default=None,
        help="Column layout preset (default: dependency, or the one from --config)")
    parser.add_argument("--config", metavar="PATH",
        help="YAML config with 'schema' and 'format' sections")
    parser.add_argument("--skip-errors", action="store_true",
        help="Log and skip malformed sentences instead of aborting")
    parser.add_argument("--strict", action="store_true",
        help="Require exactly one root per sentence")
    parser.add_argument("--profile-out", metavar="PATH",
        help="Save per-sentence profiles to JSON")
    return parser


def resolve_settings(args):
    cfg = load_config(args.config) if args.config else {}
    if args.preset or "schema" not in cfg:
        cfg["schema"] = {"preset": args.preset or "dependency"}
    return schema_from_config(cfg), options_from_config(cfg)


def print_summary(input_path: Path, stats: dict, skipped: int):
    table = Table(title=f"Sentences in {input_path.name}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Read", str(stats["total"]))
    table.add_row("Valid", str(stats["valid"]))
    table.add_row("Invalid", str(stats["invalid"]))
    table.add_row("Skipped (malformed)", str(skipped))
    console.print(table)

    for entry in stats["errors"][:20]:
        console.print(f"[yellow]{entry['id']}[/yellow]: {'; '.join(entry['issues'])}")


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = build_parser().parse_args(argv)

    input_path = Path(args.input)
    try:
        schema, options = resolve_settings(args)
    except InvalidSchema as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return 2

    pipeline = GraphPipeline(
        schema,
        options,
        on_error="skip" if args.skip_errors else "raise",
    )
    profiler = GraphProfiler()
    profiles = []
    graphs = []

    try:
        for graph in tqdm(pipeline.process_file(input_path), desc=input_path.name):
            graphs.append(graph)
            profiles.append(profiler.profile_graph(graph))
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        return 1
    except StreamReadError as e:
        logger.error(f"Could not read {input_path}: {e}")
        return 1
    except DepTreeError as e:
        logger.error(f"Malformed sentence in {input_path}: {e}")
        return 1

    stats = GraphValidator.validate_batch(graphs, strict=args.strict)
    print_summary(input_path, stats, skipped=len(pipeline.errors))

    if args.profile_out:
        with open(args.profile_out, "w", encoding="utf-8") as f:
            json.dump(profiles, f, ensure_ascii=False, indent=2)
        logger.info(f"Saved {len(profiles)} profiles to {args.profile_out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
