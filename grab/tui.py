#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared console helpers for grab.
"""
from __future__ import annotations
import platform

from rich.console import Console
from rich.panel import Panel

def get_system_label() -> str:
    """Return a formatted system status string."""
    os_name = platform.system()
    release = platform.release()
    if os_name == "Darwin":
        return f"[dim]Running on macOS {release}[/]"
    if os_name:
        return f"[dim]Running on {os_name} {release}[/]"
    return "[dim]Running on an unknown platform[/]"

def section(console: Console, title: str, subtitle: str = "") -> None:
    msg = f"[bold]{title}[/]"
    if subtitle:
        msg += f"\n[dim]{subtitle}[/]"
    console.print(Panel.fit(msg, border_style="magenta"))
