"""
SynHash256 command line demo.

    python -m synhash                       # reference demo messages
    python -m synhash "some text" "other"   # digests + distance of first two
    python -m synhash --distance HEX_A HEX_B
"""

import argparse
import os
import sys

from .distance import InvalidDigestFormat, hamming_distance
from .synhash import synhash_hex

DEMO_MESSAGES = ['hello, world 1', 'hello, world 2']


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='synhash',
        description='Print SynHash256 digests and their Hamming distance',
    )
    ap.add_argument('messages', nargs='*',
                    help='Messages to hash (raw argv bytes). Default: the two demo messages')
    ap.add_argument('--distance', nargs=2, metavar=('HEX_A', 'HEX_B'),
                    help='Only print the distance between two existing digests')
    return ap


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    if args.distance:
        try:
            print(f"Hamming Distance: {hamming_distance(*args.distance)}")
        except InvalidDigestFormat as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        return 0

    messages = args.messages or DEMO_MESSAGES
    # fsencode undoes surrogateescape, so non-UTF-8 argv bytes hash as given
    digests = [synhash_hex(os.fsencode(m)) for m in messages]
    for message, digest in zip(messages, digests):
        print(f"256-bit Hash: {digest}  {message!r}")

    if len(digests) >= 2:
        print(f"Hamming Distance: {hamming_distance(digests[0], digests[1])}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
