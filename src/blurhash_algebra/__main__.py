"""エントリーポイント: uv run python -m blurhash_algebra INPUT OUTPUT [options]

画像を係数グリッドに射影し、指定順に編集してプレビュー PNG を書き出す。
"""

from __future__ import annotations

import argparse
import logging
import sys

from blurhash_algebra.application.preview_service import PreviewService
from blurhash_algebra.domain.image_model import Adjustment, RenderSpec
from blurhash_algebra.domain.probes import average_colour, contrast_colour

logger = logging.getLogger("blurhash_algebra")


class _StepAction(argparse.Action):
    """編集オプションをコマンドライン上の順序で steps に積む。"""

    def __call__(self, parser, namespace, values, option_string=None):  # type: ignore[override]
        steps = list(getattr(namespace, "steps", None) or [])
        steps.append((self.const, values))
        namespace.steps = steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blurhash-algebra",
        description="Project an image onto cosine coefficients, edit them, and render a preview.",
    )
    parser.add_argument("input", help="Input image (JPEG, PNG, ...)")
    parser.add_argument("output", help="Output preview image (PNG)")
    parser.add_argument(
        "--components", nargs=2, type=int, default=(4, 3), metavar=("X", "Y"),
        help="Horizontal and vertical component counts (1-9, default: 4 3)",
    )
    parser.add_argument(
        "--size", nargs=2, type=int, default=(128, 128), metavar=("W", "H"),
        help="Preview size in pixels (default: 128 128)",
    )
    for adjustment in Adjustment:
        if adjustment.takes_value:
            parser.add_argument(
                f"--{adjustment.value}", action=_StepAction, const=adjustment,
                type=float, metavar="F", dest="steps", default=[],
            )
        else:
            parser.add_argument(
                f"--{adjustment.value}", action=_StepAction, const=adjustment,
                nargs=0, dest="steps", default=[],
            )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        spec = RenderSpec(
            width=args.size[0],
            height=args.size[1],
            x_components=args.components[0],
            y_components=args.components[1],
        )
    except ValueError as e:
        parser.error(str(e))

    service = PreviewService()
    try:
        grid = service.encode_file(args.input, spec)
        grid = service.apply(grid, [(a, v if a.takes_value else None) for a, v in args.steps])
        service.render_to_file(grid, spec, args.output)
    except (OSError, ValueError) as e:
        # BlurHashError と Pillow の未知の拡張子はどちらも ValueError
        logger.error("%s", e)
        return 1

    print(f"average:  {average_colour(grid).to_hex()}")
    print(f"contrast: {contrast_colour(grid).to_hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
