#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path

from scansheet.catalogue.vim import default_catalogue
from scansheet.config import DEFAULT_PAPER_SIZE, load_app_config
from scansheet.render.sheet import render_to_file
from scansheet.symbology.scan import BarcodeScanError, scan_sheet


def main() -> int:
    parser = argparse.ArgumentParser(description="Scan demo: render a sheet then decode it.")
    parser.add_argument("--config", help="Path to a TOML config file.")
    parser.add_argument("--paper", choices=["A4", "LETTER"], help="Paper size preset.")
    parser.add_argument("--output", default="scan_demo.png", help="Sheet image path.")
    args = parser.parse_args()

    paper = None if args.config else args.paper or DEFAULT_PAPER_SIZE
    config = load_app_config(args.config, paper_size=paper)
    catalogue = default_catalogue()
    output = Path(args.output)
    result = render_to_file(catalogue, config.sheet, output)
    print(f"Wrote {output} ({len(result.rendered)} rendered, {len(result.skipped)} skipped)")

    try:
        decoded = scan_sheet(output, result.geometry)
    except BarcodeScanError as exc:
        print(f"Scan failed: {exc}")
        return 2

    failures = [
        (index, entry.code, value)
        for index, (entry, value) in enumerate(zip(catalogue, decoded))
        if value != entry.code
    ]
    for index, expected, value in failures:
        print(f"cell {index}: expected {expected!r}, decoded {value!r}")
    print(f"Decoded {len(catalogue) - len(failures)}/{len(catalogue)} cells")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
