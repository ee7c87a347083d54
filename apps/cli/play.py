# apps/cli/play.py
"""
Interactive console game.

This script:
  1) Loads the dictionary (prints a one-line validation summary with -v).
  2) Starts a Session with a random secret (seeded with --seed).
  3) Reads one line per turn:
       - a word  -> scored, printed as the word and its marker pattern
       - empty   -> a hint (a random word consistent with everything so far)
  4) Stops on a win, after the last attempt, or at end of input.

Markers: '+' right letter right place, '^' letter elsewhere, '-' no such letter.
Everything that happens is logged to --log-file (wordle.log by default).
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from wordgame.datasets import (
    DictionaryLoadError, load_dictionary, pretty_summary, validate_dictionary,
)
from wordgame.engine import GameError, WordNotFound
from wordgame.game import MAX_ATTEMPTS, Session
from wordgame.logs import configure_logging

log = logging.getLogger("wordgame.cli.play")

BANNER = (
    f"Guess the 5-letter word in {MAX_ATTEMPTS} attempts.\n"
    "Markers: + right place, ^ in the word but elsewhere, - not in the word.\n"
    "Press Enter on an empty line for a hint."
)


def play(session: Session, stdin=None, stdout=None) -> bool:
    """
    Drive one session from line-based input. Returns True on a win.
    Streams default to the process's stdin/stdout at call time.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    def say(msg: str = "") -> None:
        stdout.write(msg + "\n")

    say(BANNER)
    while not session.is_terminal():
        say(f"\nAttempts left: {session.remaining_attempts()}")
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            log.info("Input closed with %d attempt(s) left", session.remaining_attempts())
            break
        text = line.strip()

        if not text:
            hint = session.request_hint()
            if hint is None:
                say("No hint available")
            else:
                say(f"Hint: {hint}")
            log.info("Hint requested: %s", hint)
            continue

        try:
            result = session.submit_attempt(text)
        except WordNotFound as e:
            say(f"X {e}")
            log.info("Word not in dictionary: %r", text)
            continue
        except GameError as e:
            say(f"X {e}")
            log.info("Rejected input %r: %s", text, e)
            continue

        say(f"> {result.word}")
        say(f"> {result.pattern}")

    if session.is_won():
        say("\nYou guessed it!")
    else:
        say(f"\nGame over. The word was: {session.secret}")
    return session.is_won()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Five-letter word guessing game")
    ap.add_argument("--dict", dest="dictionary", default="data/russian_nouns.txt",
                    help="path to the dictionary (one word per line, UTF-8)")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret and hints")
    ap.add_argument("--log-file", default="wordle.log", help="session log file")
    ap.add_argument("--log-level", default="WARNING", help="console log level")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print a dictionary validation summary first")
    args = ap.parse_args(argv)

    configure_logging(args.log_level, args.log_file)
    log.info("Starting game with dictionary %s", args.dictionary)

    if args.verbose:
        print(pretty_summary(validate_dictionary(args.dictionary)))

    try:
        dictionary = load_dictionary(args.dictionary)
    except (FileNotFoundError, DictionaryLoadError) as e:
        print(f"Cannot load dictionary: {e}", file=sys.stderr)
        log.error("Cannot load dictionary %s: %s", args.dictionary, e)
        return 2

    session = Session(dictionary, random.Random(args.seed))
    log.info("Secret word: %s", session.secret)

    won = play(session)
    log.info("Finished: %s after %d attempt(s)", "won" if won else "lost",
             session.attempts_used())
    return 0


if __name__ == "__main__":
    sys.exit(main())
