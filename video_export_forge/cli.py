from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    # RU: Entrypoint пакета тонкий; логика живёт в scripts/.
    # EN: Package entrypoint stays thin; the logic lives in scripts/.
    parser = argparse.ArgumentParser(
        prog="video-export-forge",
        description="Video Export Forge",
        epilog="Run `<command> --help` for command options.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("command", nargs="?", choices=("plan", "progress"))
    args, rest = parser.parse_known_args(argv)

    if args.version:
        from . import __version__

        print(__version__)
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    if args.help:
        rest = ["--help", *rest]

    if args.command == "plan":
        from video_export_forge.scripts.plan_export import main as plan_main

        plan_main(rest)
    else:
        from video_export_forge.scripts.watch_progress import main as progress_main

        progress_main(rest)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
