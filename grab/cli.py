# grab/cli.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from . import __version__
from .core import GrabError, UsageError, parse_project, setup_logging
from .ui import console, run_grab_flow

logger = logging.getLogger(__name__)

USAGE = """
grab [flags] repo

Flags:
	-r [newname] Rename the local download to [newname]
	-p [newpath] Install the local download to [newpath]
	-d           Perform a dry-run - do not download or install

Example:
	$ grab -p "~/bin/" -r "barg" tobyjoe/grab
"""

EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="grab",
        usage=USAGE,
        description="Download the latest release asset of a GitHub project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("repo", nargs="?", default="", help="Project as owner/repo")
    ap.add_argument("-r", "--rename", default="", metavar="NEWNAME", help="Rename the local download to NEWNAME")
    ap.add_argument("-p", "--path", default="", metavar="NEWPATH", help="Install the local download to NEWPATH")
    ap.add_argument("-d", "--dry-run", action="store_true", help="Perform a dry-run - do not download or install")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging for core/network")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, console=console)

    logger.info("Flags: rename(%s), path(%s), dry(%s)", args.rename, args.path, args.dry_run)
    logger.info("Args : %s", args.repo)

    try:
        project = parse_project(args.repo)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        console.print(USAGE, markup=False, highlight=False)
        return EXIT_USAGE

    try:
        run_grab_flow(
            project,
            rename=args.rename or None,
            out_dir=args.path or None,
            dry_run=args.dry_run,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/]")
        return EXIT_INTERRUPTED
    except GrabError as e:
        console.print(f"[red]Error:[/] {e}", highlight=False)
        return EXIT_ERROR
    return 0
