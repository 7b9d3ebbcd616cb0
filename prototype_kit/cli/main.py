"""
CLI entrypoint for prototype-kit.

Subcommands:
    new-version NAME --from SOURCE   duplicate a version's page folder
    list-versions                    show configured versions and their prefixes
    serve                            run the prototype with uvicorn

User output goes to stdout via oprint().
Diagnostics go to stderr via logging.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from prototype_kit.cli.logging_setup import setup_cli_logging
from prototype_kit.cli.scaffold import ScaffoldError, create_version
from prototype_kit.web.settings import Settings, get_settings

logger = logging.getLogger("prototype_kit.cli")


def oprint(*args, **kwargs) -> None:
    """
    User-facing output printer (stdout).
    """
    try:
        print(*args, file=sys.stdout, flush=True, **kwargs)
    except BrokenPipeError:
        raise SystemExit(0)


def _settings_for(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if getattr(args, "template_dir", None):
        settings = settings.model_copy(update={"template_dir": Path(args.template_dir)})
    return settings


def _cmd_new_version(args: argparse.Namespace) -> int:
    settings = _settings_for(args)

    source = args.source or (settings.versions[-1] if settings.versions else "v1")
    result = create_version(settings.template_dir, args.name, source=source, force=args.force)

    oprint(f"Created {result.mount.name} from {source} ({result.files_copied} files)")
    oprint(f"  folder: {result.target_dir}")
    oprint(f"  prefix: {result.mount.prefix}")

    if result.mount.name not in settings.versions:
        mounted = ",".join((*settings.versions, result.mount.name))
        oprint(f"To mount it, set PROTOTYPE_VERSIONS={mounted}")
    return 0


def _cmd_list_versions(args: argparse.Namespace) -> int:
    settings = _settings_for(args)
    rows = [
        {
            "name": m.name,
            "prefix": m.prefix,
            "template_dir": str(settings.template_dir / m.name),
            "exists": (settings.template_dir / m.name).is_dir(),
        }
        for m in settings.mounts()
    ]

    if args.output == "json":
        sys.stdout.write(json.dumps({"versions": rows}, indent=2) + "\n")
        return 0

    for row in rows:
        marker = "" if row["exists"] else "  (missing folder)"
        oprint(f"{row['name']:<12} {row['prefix']:<14} {row['template_dir']}{marker}")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = _settings_for(args)
    logger.info(
        "serving %s on %s:%s (versions: %s)",
        settings.service_name,
        args.host,
        args.port,
        ", ".join(settings.versions),
    )
    uvicorn.run(
        "prototype_kit.web.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="prototype-kit")
    p.add_argument("--quiet", action="store_true")
    p.add_argument("--trace", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)

    nv = sub.add_parser("new-version", help="Duplicate a version's page folder")
    nv.add_argument("name")
    nv.add_argument("--from", dest="source", default=None)
    nv.add_argument("--template-dir", default=None)
    nv.add_argument("--force", action="store_true")
    nv.set_defaults(func=_cmd_new_version)

    lv = sub.add_parser("list-versions", help="Show configured versions")
    lv.add_argument("--template-dir", default=None)
    lv.add_argument("--output", choices=["pretty", "json"], default="pretty")
    lv.set_defaults(func=_cmd_list_versions)

    sv = sub.add_parser("serve", help="Run the prototype server")
    sv.add_argument("--host", default="127.0.0.1")
    sv.add_argument("--port", type=int, default=3000)
    sv.add_argument("--reload", action="store_true")
    sv.set_defaults(func=_cmd_serve, request_context_logs=True)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_cli_logging(
        trace=args.trace,
        quiet=args.quiet,
        request_context=getattr(args, "request_context_logs", False),
    )

    try:
        return args.func(args)
    except ValueError as e:
        # Bad version names / settings: clean failure, no traceback.
        logger.error(str(e))
        return 2
    except ScaffoldError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
