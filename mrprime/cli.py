# Usage: mrprime [-k 16] [--sequential] [N ...]   (reads N from stdin, one per line, when none given)

from __future__ import annotations
import argparse
import logging
import sys

from .config import get_settings
from .miller_rabin import is_prime
from .rand import secure_words, seeded_words

log = logging.getLogger(__name__)


def parse_int(text: str) -> int:
    """Decimal or 0x-prefixed hex, underscores allowed."""
    t = str(text).strip().replace("_", "")
    if t and t[0] in "+-":
        sign, t = (-1 if t[0] == "-" else 1), t[1:]
    else:
        sign = 1
    base = 10
    if t[:2].lower() == "0x":
        t, base = t[2:], 16
    # int() takes its own sign and padding; only one leading sign is allowed
    if not t or t[0] in "+-" or t != t.strip():
        raise ValueError(f"invalid integer: {text!r}")
    return sign * int(t, base)


def process(text: str, args, words) -> int:
    try:
        n = parse_int(text)
    except ValueError:
        print(f"{text}\tinvalid", file=sys.stderr)
        return 1
    verdict = is_prime(n, args.rounds, parallel=not args.sequential,
                       words=words, max_workers=args.workers)
    print(f"{text}\t{'prime' if verdict else 'composite'}")
    return 0


def main(argv=None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(prog="mrprime", description="Miller-Rabin probable-prime test")
    ap.add_argument("-k", "--rounds", type=int, default=settings.rounds,
                    help="random rounds above 2^64 (false-positive bound 4^-k)")
    ap.add_argument("--sequential", action="store_true", default=not settings.parallel,
                    help="evaluate witnesses one after another")
    ap.add_argument("--workers", type=int, default=settings.workers, help="thread pool size")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--secure", action="store_true", help="draw witnesses from the OS CSPRNG")
    src.add_argument("--seed", type=int, default=None, help="reproducible witness draws")
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("N", nargs="*", help="integers to test (decimal or 0x hex)")
    args = ap.parse_args(argv)

    if args.rounds < 1:
        ap.error("--rounds must be >= 1")
    if args.workers < 1:
        ap.error("--workers must be >= 1")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.secure:
        words = secure_words
    elif args.seed is not None:
        words = seeded_words(args.seed)
    else:
        words = None

    rc = 0
    inputs = args.N if args.N else (line.strip() for line in sys.stdin)
    for text in inputs:
        if not text:
            continue
        rc |= process(text, args, words)
    log.debug("done, rc=%d", rc)
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
