"""CLI command that quantizes Gaussian densities and prints the table.

Examples
--------
  quantpdf table
  quantpdf table --gaussian 10,5,128 --gaussian 10,2,30 --format json
  quantpdf table --format csv --output out/table.csv
"""

from __future__ import annotations

from pathlib import Path
import csv
import io
import json
import logging

import click

from quantpdf.config import Config
from quantpdf.errors import QuantPDFError
from quantpdf.table import QuantizedFrequencyTable
from quantpdf.utils import build_table, ensure_dir


_LOGGER = logging.getLogger(__name__)


def render_table(table: QuantizedFrequencyTable, fmt: str) -> str:
    """Render ``table`` as plain rows, JSON, or CSV."""

    fmt = fmt.lower()
    if fmt == "json":
        payload = {
            "meta": table.to_dict(),
            "rows": [
                {"symbol": sym, "count": cnt, "cumulative": cum}
                for sym, cnt, cum in table.rows()
            ],
        }
        return json.dumps(payload, indent=2)
    if fmt == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["symbol", "count", "cumulative"])
        writer.writerows(table.rows())
        return buf.getvalue().rstrip("\n")
    return f"{table.format_rows()}\ntotal: {table.total()}"


@click.command(name="table")
@click.option(
    "gaussians",
    "--gaussian",
    type=str,
    multiple=True,
    help="Gaussian density as 'height,width,mean' (repeatable; default: three built-in peaks)",
)
@click.option(
    "fmt",
    "--format",
    type=click.Choice(["table", "json", "csv"], case_sensitive=False),
    default=Config.DEFAULT_OUTPUT_FORMAT,
    show_default=True,
    help="Output format",
)
@click.option(
    "output",
    "--output",
    type=click.Path(path_type=Path),
    required=False,
    help="Write the rendered table to this file instead of stdout",
)
def table(gaussians: tuple[str, ...], fmt: str, output: Path | None) -> None:
    """Quantize a sum of Gaussian densities into a frequency table."""

    try:
        model = build_table(gaussians)
        text = render_table(model, fmt)
        if output is None:
            click.echo(text)
        else:
            ensure_dir(output.parent)
            output.write_text(text + "\n", encoding="utf-8")
            click.echo(f"Saved table to {output}")
    except (QuantPDFError, ValueError) as e:
        _LOGGER.debug("table command failed", exc_info=True)
        click.secho(str(e), fg="red", err=True)
        raise SystemExit(1)
