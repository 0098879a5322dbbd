import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import CiphaConfig, load_config
from .dispatcher import (
    CiphaError,
    get_message,
    run_cipher,
    supported_ciphers,
)
from .history import log_event
from .plugin import get_plugin, list_plugins
from .utils import DEFAULT_ENCODING, write_text


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Rail count must be at least 1, got {number}.")
    return number


def _write_output(args: argparse.Namespace, output: str) -> None:
    if args.output_file:
        write_text(args.output_file, output + "\n")
    else:
        print(output)


def _record(args: argparse.Namespace, config: CiphaConfig) -> None:
    if args.no_history or not config.history_enabled:
        return
    log_event(
        action=args.command,
        payload={
            "cipher": getattr(args, "cipher", None),
            "in_file": getattr(args, "file", None),
            "out_file": args.output_file,
        },
        path=config.history_path,
    )


def _run_transform(args: argparse.Namespace, config: CiphaConfig) -> str:
    message = get_message(args.message, args.file, encoding=args.encoding)
    return run_cipher(
        args.command,
        args.cipher,
        message,
        shift=config.default_shift if args.shift is None else args.shift,
        key=args.key if args.key is not None else "",
        rails=config.default_rails if args.rails is None else args.rails,
        strict=args.strict or config.strict,
    )


def _run_list(args: argparse.Namespace, config: CiphaConfig) -> str:
    lines = []
    for name, description in sorted(list_plugins().items()):
        plugin = get_plugin(name)
        params = " ".join(f"--{p}" for p in plugin.params) if plugin else ""
        lines.append(f"{name:<10} {description}" + (f" [{params}]" if params else ""))
    return "\n".join(lines)


def _add_transform_args(p: argparse.ArgumentParser, verb: str) -> None:
    p.add_argument(
        "-c",
        "--cipher",
        required=True,
        help=f"The cipher to use ({', '.join(supported_ciphers())}).",
    )
    p.add_argument("-m", "--message", help=f"The message to {verb}.")
    p.add_argument("-f", "--file", help="Read the message from a file (ignored if --message).")
    p.add_argument(
        "-s",
        "--shift",
        type=int,
        help="Shift value for Caesar cipher (default: 3).",
    )
    p.add_argument("-k", "--key", help=f"Key to {verb} by (Vigenere).")
    p.add_argument(
        "-r",
        "--rails",
        type=_positive_int,
        help="Number of rails for the rail fence cipher (default: 3).",
    )
    p.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Encoding used to read --file (default: utf-8).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cipha", description="A simple CLI for ciphers and crypto.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-o", "--output-file", help="Output to a file instead of stdout.")
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on an unknown cipher instead of printing 'Unsupported cipher'.",
    )
    parser.add_argument("--config", type=Path, help="Path to a JSON config file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode a message using a cipher")
    _add_transform_args(encode_parser, "encode")
    encode_parser.set_defaults(func=_run_transform)

    decode_parser = subparsers.add_parser("decode", help="Decode a message using a cipher")
    _add_transform_args(decode_parser, "decode")
    decode_parser.set_defaults(func=_run_transform)

    list_parser = subparsers.add_parser("list", help="List the available ciphers")
    list_parser.set_defaults(func=_run_list)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    try:
        result = args.func(args, config)
        _write_output(args, result)
    except (CiphaError, ValueError, OSError) as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    _record(args, config)


if __name__ == "__main__":
    main(sys.argv[1:])
