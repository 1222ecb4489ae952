"""Translate domain failures into CLI errors."""

from __future__ import annotations

import click

from procurement.domain.exceptions import DomainException


def to_click_error(exc: DomainException) -> click.ClickException:
    prefix = "Warning" if exc.category == "warning" else "Error"
    return click.ClickException(f"{prefix}: {exc}")
