"""CLI entrypoint: preview an image in the terminal and redraw on resize."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from imprev_core import (
    AppConfig,
    ResizeController,
    ResizeNotifier,
    configure_logging,
    get_logger,
    install_crash_hooks,
    load_config,
    query_terminal_size,
)
from imprev_renderer import ArgumentError, DecodeError, load_image


def _installed_version() -> str:
    try:
        return metadata.version("imprev")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _settings(args: argparse.Namespace) -> AppConfig:
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    if args.height_scale is not None:
        cfg.render.height_scale = args.height_scale
    if args.log_level is not None:
        cfg.logging.level = args.log_level
    if args.log_json:
        cfg.logging.json = True
    return cfg


def _image_path(args: argparse.Namespace) -> Path:
    if not args.image:
        raise ArgumentError("Please provide a target image path.")
    return Path(args.image).expanduser()


def cmd_render(args: argparse.Namespace, cfg: AppConfig) -> int:
    logger = get_logger()
    try:
        path = _image_path(args)
    except ArgumentError as exc:
        print(str(exc), file=sys.stderr)
        return 0

    try:
        image = load_image(path)
    except DecodeError as exc:
        print(str(exc), file=sys.stderr)
        logger.debug("decode failed for %s", path, extra={"event": "decode_failed"})
        return 1

    controller = ResizeController(
        image,
        query_size=query_terminal_size,
        height_scale=cfg.render.height_scale,
        exit_hint=cfg.render.exit_hint,
        clear_on_resize=cfg.render.clear_on_resize,
    )

    if args.once:
        return 0 if controller.render_pass() else 1

    notifier = ResizeNotifier()
    if not notifier.install():
        logger.warning("terminal resize notifications are not available on this platform")
    install_crash_hooks()
    try:
        controller.run_forever(notifier)
    except KeyboardInterrupt:
        return 130
    finally:
        notifier.uninstall()
    return 0


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imprev", description="Preview an image as colored blocks in the terminal")
    parser.add_argument("image", nargs="?", default=None, help="Path to the image file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    parser.add_argument("--config", default=None, help="Optional JSON settings file")
    parser.add_argument(
        "--height-scale",
        type=_positive_float,
        default=None,
        help="Vertical compression applied for tall character cells (default 0.5)",
    )
    parser.add_argument("--once", action="store_true", help="Render a single frame and exit")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
    )
    parser.add_argument("--log-json", action="store_true", help="Emit diagnostics on stderr as JSON lines")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _settings(args)
    configure_logging(level=cfg.logging.level, json_format=cfg.logging.json)
    return int(cmd_render(args, cfg))


if __name__ == "__main__":
    raise SystemExit(main())
