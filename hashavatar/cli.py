"""Command-line avatar generator — writes one avatar to stdout or a file."""

from __future__ import annotations

import argparse
import sys

from hashavatar.avatars import AvatarKind, make_avatar
from hashavatar.config import settings
from hashavatar.errors import AvatarError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="hashavatar — deterministic SVG avatars")
    parser.add_argument("name", help="Name to derive the avatar from")
    parser.add_argument(
        "-k",
        "--kind",
        default=AvatarKind.IDENTICON.name.lower(),
        help="Avatar kind name or code (default: identicon)",
    )
    parser.add_argument("-e", "--email", default="", help="Email for Gravatar kinds")
    parser.add_argument("-s", "--size", type=int, default=settings.default_size)
    parser.add_argument("-g", "--grid-size", type=int, default=settings.default_grid_size)
    parser.add_argument(
        "--asymmetric",
        action="store_true",
        help="Fill the identicon grid without mirroring",
    )
    parser.add_argument("--base64", action="store_true", help="Emit an <img> data URI tag")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        avatar = make_avatar(
            args.kind,
            args.name,
            email=args.email,
            size=args.size,
            grid_size=args.grid_size,
            symmetric=not args.asymmetric,
        )
    except (AvatarError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    html = avatar.html(args.base64)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(html)
    else:
        print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
