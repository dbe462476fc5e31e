"""CLI for litscope. Usage: python -m litscope <directory>"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m litscope",
        description="Combine database exports and remove duplicate records.",
    )
    parser.add_argument("directory", help="folder holding the exported searches")
    parser.add_argument("-o", "--output", default="search_hits.csv", help="output CSV path")
    parser.add_argument("--keep-duplicates", action="store_true", help="skip duplicate removal")
    parser.add_argument("--no-clean", action="store_true", help="leave keywords as exported")
    parser.add_argument("--save-full", metavar="PATH", help="also write the table before dedup")
    parser.add_argument("--title-mode", choices=["exact", "token-similarity", "quick", "tokens"])
    parser.add_argument("--doc-sim", type=float)
    parser.add_argument("--title-sim", type=float)
    parser.add_argument("--mean-sim", type=float)
    parser.add_argument("--report", metavar="PATH", help="write duplicate pairs as Markdown")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    args_list = sys.argv[1:] if argv is None else argv
    if not args_list:
        print("Usage: python -m litscope <directory> [options]", file=sys.stderr)
        sys.exit(1)

    args = _build_parser().parse_args(args_list)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        count = _run(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {count} records to {args.output}")


def _run(args: argparse.Namespace) -> int:
    from litscope.config import DedupConfig, load_config
    from litscope.dedup import Deduplicator, records_from_frame
    from litscope.export import export_csv, export_markdown
    from litscope.sources import import_scope

    config = load_config()
    overrides = {
        "doc_sim_threshold": args.doc_sim,
        "title_sim_threshold": args.title_sim,
        "mean_sim_threshold": args.mean_sim,
        "title_comparison_mode": args.title_mode,
    }
    dedup_config = DedupConfig.model_validate(
        config.dedup.model_dump() | {k: v for k, v in overrides.items() if v is not None}
    )

    hits = import_scope(
        args.directory,
        remove_duplicates=False,
        clean_dataset=False,
        save_full_dataset=args.save_full is not None,
        full_dataset_path=args.save_full or "full_dataset.csv",
    )

    if config.imports.remove_duplicates and not args.keep_duplicates:
        records = records_from_frame(hits)
        result = Deduplicator(dedup_config).find_duplicates(records)
        if args.report:
            Path(args.report).write_text(export_markdown(result, records), encoding="utf-8")
        hits = hits.iloc[result.kept]

    if config.imports.clean_dataset and not args.no_clean:
        from litscope.cleaning import clean_keywords

        hits = clean_keywords(hits)

    export_csv(hits, args.output)
    return len(hits)


if __name__ == "__main__":
    main()
