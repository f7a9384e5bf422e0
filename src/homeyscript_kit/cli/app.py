"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import sys

from homeyscript_kit.contracts.exceptions import OperationCancelledError
from homeyscript_kit.contracts.script import CommandEvent


def build_event(args: argparse.Namespace) -> CommandEvent:
    flags = {"dir": args.dir, "script": getattr(args, "script", None)}
    target = getattr(args, "target", None)
    return CommandEvent(
        flags={key: value for key, value in flags.items() if value is not None},
        args=[target] if target else [],
    )


async def run_command(args: argparse.Namespace) -> object:
    import homeyscript_kit.cli as cli

    config_file = cli.load_config_file(args.config)
    session = cli.resolve_session_config(
        config_file,
        api_key=args.api_key,
        ip=args.ip,
        host=args.host,
        https=args.https,
        verbose=args.verbose,
    )
    handler = cli.HANDLERS[args.command]
    event = build_event(args)

    if args.verbose:
        result = await handler(event, session, skip_confirm=args.yes)
    else:
        with cli.RichOperationProgress() as progress:
            result = await handler(event, session, skip_confirm=args.yes, progress=progress)

    cli.render_result(result)
    return result


def main(argv: list[str] | None = None) -> int:
    import homeyscript_kit.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        cli.asyncio.run(cli.run_command(args))
        return 0
    except OperationCancelledError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 1
    except Exception as exc:
        print(cli.format_error(exc, verbose=args.verbose), file=sys.stderr)
        return 1


__all__ = ["build_event", "main", "run_command"]
