#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
UI layer for grab

- Live status while resolving the repository / release / tag
- Rich asset table + numeric prompt when a release has several assets
- Download with a progress bar, then chmod +x
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box
from rich.status import Status
from rich.progress import (
    BarColumn, DownloadColumn, Progress, TextColumn, TimeRemainingColumn, TransferSpeedColumn
)

from .core import (
    Asset,
    NoAssetsError,
    Project,
    Release,
    SelectionError,
    download_asset,
    human_size,
    make_executable,
    output_path,
    resolve_release,
)
from .tui import get_system_label, section

logger = logging.getLogger(__name__)

console = Console()

ASSET_PROMPT = "Which asset would you like to download?"

# ────────────────────────── Asset selection ──────────────────────────
def render_assets(assets: List[Asset]) -> None:
    table = Table(
        title="Release Assets",
        show_lines=False,
        header_style="bold magenta",
        box=box.SIMPLE_HEAVY
    )
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Name", overflow="fold")
    table.add_column("Size", no_wrap=True, min_width=8)
    table.add_column("URL", overflow="fold")
    for i, a in enumerate(assets, 1):
        logger.debug(" (%d) %s (%s)", i, a.name, a.url)
        table.add_row(str(i), a.name, human_size(a.size), a.url)
    console.print(table)

def pick_asset(assets: List[Asset], ask: Optional[Callable[[str], str]] = None) -> Asset:
    if not assets:
        raise NoAssetsError("No assets to download")
    if len(assets) == 1:
        return assets[0]

    render_assets(assets)
    ask = ask or (lambda q: Prompt.ask(q, console=console))
    try:
        raw = (ask(ASSET_PROMPT) or "").strip()
    except EOFError:
        raw = ""
    console.print()
    try:
        v = int(raw)
    except ValueError:
        raise SelectionError("You must select an asset to download") from None
    if not 1 <= v <= len(assets):
        raise SelectionError("You must select an asset to download")
    return assets[v-1]

# ────────────────────────── Download ──────────────────────────
def download_with_progress(url: str, out_path: Path) -> int:
    task_desc = f"[bold]{out_path.name}[/]"
    with Progress(
        TextColumn(task_desc, justify="left"),
        BarColumn(),
        DownloadColumn(),
        TransferSpeedColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=False
    ) as progress:
        task_id = progress.add_task("dl", total=None)

        def on_progress(done: int, total: int) -> None:
            # 0 means no Content-Length; keep the bar indeterminate
            progress.update(task_id, completed=done, total=total or None)

        return download_asset(url, out_path, on_progress=on_progress)

# ────────────────────────── Grab flow ──────────────────────────
def describe_release(release: Release) -> str:
    kind = "pre-release" if release.prerelease else "release"
    return f"{release.title} [dim]({kind} {release.tag_name}, {len(release.assets)} asset(s))[/]"

def run_grab_flow(
    project: Project,
    rename: Optional[str] = None,
    out_dir: Optional[str] = None,
    dry_run: bool = False,
    ask: Optional[Callable[[str], str]] = None,
) -> Optional[Path]:
    """Resolve, pick and download one asset. Returns the saved path (None on dry-run)."""
    logger.info("Grabbing from %s...", project.slug)

    with Status("[bold]Resolving release…[/] starting", console=console, spinner="dots") as status:
        def progress_cb(msg: str):
            status.update(f"[bold]Resolving release…[/] {msg}")

        release = resolve_release(project, progress=progress_cb)

    console.print(f"[bold cyan]Release:[/] {describe_release(release)}")
    asset = pick_asset(release.assets, ask=ask)
    console.print(f"[bold cyan]Asset:[/] {asset.name} [dim]({human_size(asset.size)})[/]")

    if dry_run:
        logger.info("Dry-run completed")
        section(console, "Dry-run completed", f"Would download {asset.url}")
        return None

    out_path = output_path(asset.url, rename=rename, out_dir=out_dir)
    download_with_progress(asset.url, out_path)
    make_executable(out_path)

    section(console, "Download Complete", get_system_label())
    console.print(f"[green]Done![/] File saved:\n[bold]{out_path}[/]")
    return out_path
