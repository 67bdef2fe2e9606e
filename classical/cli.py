import argparse
import logging
import sys
from typing import Dict, List, Optional

from .caesar import caesar_transform, format_mapping_table, parse_shift
from .errors import CipherError
from .hill import hill_table
from .matrix_key import parse_key

logger = logging.getLogger(__name__)

# ===============================
# Helpers
# ===============================

def prompt_if_missing(value: Optional[str], question: str) -> str:
    if value is not None:
        return value
    return input(question)

def format_table(rows: Dict[str, str]) -> str:
    """
    Two column table, one row per direction:

    (index)     | Values
    ------------+-------
    encryption  | HIAT
    decryption  | ...
    """
    width = max(len("(index)"), *(len(name) for name in rows))
    value_width = max(len("Values"), *(len(v) for v in rows.values()))
    lines = [f"{'(index)':<{width}} | {'Values':<{value_width}}",
             "-" * width + "-+-" + "-" * value_width]
    for name, value in rows.items():
        lines.append(f"{name:<{width}} | {value:<{value_width}}")
    return "\n".join(lines)

# ===============================
# Commands
# ===============================

def run_caesar(args) -> None:
    text = prompt_if_missing(args.text, "What is the text?\n")
    shift = parse_shift(prompt_if_missing(args.shift, "What is the shift?\n"))
    if args.decrypt:
        shift = -shift
    logger.info("caesar: %d letters, shift %d", len(text), shift)

    if args.show_mapping:
        print("Key Mapping:")
        print(format_mapping_table(shift))
        print()
    print(caesar_transform(text, shift))

def run_hill(args) -> None:
    text = prompt_if_missing(args.text, "What is the text?\n")
    key = parse_key(prompt_if_missing(args.key, "What is the key?\n"))
    logger.info("hill: %d letters, key %s", len(text), tuple(key))

    # raises before anything is printed if the key has no inverse
    rows = hill_table(text, key)
    if args.show_key:
        print("Key Matrix:")
        print(key.format_matrix())
        print("\nInverse Key Matrix:")
        print(key.invert().format_matrix())
        print()
    print(format_table(rows))

# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="classical",
        description="Caesar shift and 2x2 Hill cipher over the 26-letter alphabet"
    )
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log intermediate values (blocks, inverse key, normalized shift)")
    sub = p.add_subparsers(dest="cmd", required=True)

    caesar = sub.add_parser("caesar", help="Shift every letter, keeping its case")
    caesar.add_argument("--text", help="Text to transform. Prompted for if omitted.")
    caesar.add_argument("--shift", help="Shift amount, may be negative. Prompted for if omitted.")
    caesar.add_argument("--decrypt", action="store_true",
                        help="Shift backwards by --shift")
    caesar.add_argument("--show-mapping", action="store_true",
                        help="Print the plain/cipher alphabet table")
    caesar.set_defaults(func=run_caesar)

    hill = sub.add_parser("hill", help="Encrypt and decrypt with a 2x2 key matrix")
    hill.add_argument("--text", help="Message. Prompted for if omitted.")
    hill.add_argument("--key", help='Four integers "a b c d" for [[a, b], [c, d]]. Prompted for if omitted.')
    hill.add_argument("--show-key", action="store_true",
                      help="Print the key matrix and its inverse modulo 26")
    hill.set_defaults(func=run_hill)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except CipherError as e:
        print("Error:", e, file=sys.stderr)
        return 1
    except EOFError:
        print("Error: input ended before all values were given.", file=sys.stderr)
        return 1
    return 0
