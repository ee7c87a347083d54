"""
Download a plain-text word list and write a clean 5-letter dictionary.

What it does:
- Downloads a UTF-8 list (one word per line) from --url.
- Normalizes every line the same way the game does (case, 'ё', stray symbols).
- Keeps 5-letter results, de-duplicates while preserving source order.
- Writes one word per line.

Usage:
    python -m script.fetch_dictionary --url https://example.org/nouns.txt --out data/russian_nouns.txt
    # or alphabetically sorted:
    python -m script.fetch_dictionary --url ... --sort --out data/russian_nouns.txt
"""

import argparse
from pathlib import Path

import requests

from wordgame.datasets import Dictionary


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    r.encoding = "utf-8"  # servers often omit the charset
    # Dictionary normalizes, filters to 5 letters and drops duplicates in order.
    return list(Dictionary(r.text.splitlines()))


def main():
    ap = argparse.ArgumentParser(description="Fetch and clean a 5-letter dictionary")
    ap.add_argument("--url", required=True, help="plain-text word list, one word per line")
    ap.add_argument("--out", default="data/russian_nouns.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
