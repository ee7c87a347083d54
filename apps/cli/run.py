# apps/cli/run.py
"""
CLI entry point for autoplay runs.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads it and picks the secrets (all words, or a seeded sample).
  3) Plays every secret by always taking the hint, with a live progress
     indicator, and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

from wordgame.datasets import (
    DictionaryLoadError, load_dictionary, pretty_summary, validate_dictionary,
)
from wordgame.game import MAX_ATTEMPTS
from wordgame.harness import run_case, summarize
from wordgame.harness.io import run_provenance, write_csv, write_manifest
from wordgame.logs import configure_logging

log = logging.getLogger("wordgame.cli.run")


def main(argv=None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Autoplay games by following hints")
    ap.add_argument("--dict", dest="dictionary", default="data/russian_nouns.txt",
                    help="path to the dictionary (one word per line, UTF-8)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-file", help="optional log file")
    ap.add_argument("--log-level", default="WARNING", help="console log level")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    configure_logging(args.log_level, args.log_file)

    # 1) Validate and print a one-liner summary (counts, SHA)
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))

    # 2) Load
    try:
        dictionary = load_dictionary(args.dictionary)
    except (FileNotFoundError, DictionaryLoadError) as e:
        print(f"Cannot load dictionary: {e}", file=sys.stderr)
        return 2

    # 3) Choose secrets (deterministic sample by seed)
    rng = np.random.default_rng(args.seed)
    words = list(dictionary)
    if args.sample and args.sample < len(words):
        idx = rng.choice(len(words), size=args.sample, replace=False)
        cases = [words[i] for i in sorted(idx)]
    else:
        cases = words
    total = len(cases)
    log.info("Playing %d game(s) over %d words", total, len(dictionary))

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for i, secret in enumerate(iterator, 1):
        results.append(run_case(dictionary, secret, seed=args.seed + i))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (i == total):
                elapsed = now - start
                rate = (i / elapsed) if elapsed > 0 else 0.0
                remaining = (total - i) / rate if rate > 0 else 0.0
                pct = 100.0 * i / max(1, total)
                sys.stderr.write(
                    f"\r[{i}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results, max_turns=MAX_ATTEMPTS)

    # 6) Write outputs (CSV + manifest)
    prov = run_provenance()
    run_id = prov["run_id"]
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, csv_path, max_turns=MAX_ATTEMPTS)
    manifest = {
        **prov,
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
    }
    write_manifest(manifest, manifest_path)

    print(f"Won {summary['wins']}/{summary['games']} ({summary['win_rate']:.1%}), "
          f"mean guesses {summary['mean_guesses']:.2f}, distribution {summary['distribution']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
