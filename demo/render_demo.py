#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from scansheet.catalogue.vim import VIM_COMMANDS, default_catalogue
from scansheet.config import PAPER_CONFIGS, load_app_config
from scansheet.core.models import Catalogue
from scansheet.render.sheet import render_to_file
from scansheet.render.text import FontCache


def main() -> None:
    fonts = FontCache()
    for paper, config_path in PAPER_CONFIGS.items():
        config = load_app_config(config_path)
        output = Path(f"render_demo_{paper.lower()}.png")
        result = render_to_file(default_catalogue(), config.sheet, output, fonts=fonts)
        print(f"Wrote {output} ({len(result.rendered)} cells)")

    rows = list(VIM_COMMANDS[:7])
    rows.insert(3, ("\x1b:wq", "<Esc>:wq", "Control characters cannot be encoded"))
    config = load_app_config(PAPER_CONFIGS["A4"])
    output = Path("render_demo_skipped.png")
    result = render_to_file(Catalogue.from_rows(rows), config.sheet, output, fonts=fonts)
    for outcome in result.skipped:
        print(f"Skipped cell {outcome.index} ({outcome.stage}): {outcome.reason}")
    print(f"Wrote {output}")


if __name__ == "__main__":
    main()
