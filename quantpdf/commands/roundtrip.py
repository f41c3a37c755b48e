"""CLI command that range-codes a symbol sequence and decodes it again.

Reports the encoded size next to the ideal code length under the quantized
model so the two can be compared.

Examples
--------
  quantpdf roundtrip
  quantpdf roundtrip --symbols 0,1,2,3 --gaussian 4,0.01,2
  quantpdf roundtrip --json
"""

from __future__ import annotations

import json
import logging

import click

from quantpdf.coding import decode_symbols, encode_symbols
from quantpdf.config import Config
from quantpdf.errors import QuantPDFError
from quantpdf.utils import build_table, parse_symbols


_LOGGER = logging.getLogger(__name__)


@click.command(name="roundtrip")
@click.option(
    "gaussians",
    "--gaussian",
    type=str,
    multiple=True,
    help="Gaussian density as 'height,width,mean' (repeatable; default: three built-in peaks)",
)
@click.option(
    "symbols",
    "--symbols",
    type=str,
    default=Config.DEFAULT_SYMBOLS,
    show_default=True,
    help="Comma-separated byte symbols to encode",
)
@click.option(
    "as_json",
    "--json",
    is_flag=True,
    help="Print the result as JSON",
)
def roundtrip(gaussians: tuple[str, ...], symbols: str, as_json: bool) -> None:
    """Encode SYMBOLS with the quantized model, decode, and compare."""

    try:
        model = build_table(gaussians)
        original = parse_symbols(symbols)
        if not original:
            raise click.ClickException("--symbols must name at least one symbol.")

        data = encode_symbols(model, original)
        decoded = decode_symbols(model, data, len(original))
        result = {
            "symbols": original,
            "decoded": decoded,
            "encoded_bytes": len(data),
            "ideal_bits": model.codelength(original),
            "matches": decoded == original,
        }
    except (QuantPDFError, ValueError) as e:
        _LOGGER.debug("roundtrip command failed", exc_info=True)
        click.secho(str(e), fg="red", err=True)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(result, indent=2))
    else:
        click.echo(f"Encoded {len(original)} symbols into {result['encoded_bytes']} bytes")
        click.echo(f"Ideal code length: {result['ideal_bits']:.2f} bits")
        click.echo(f"Decoded: {','.join(str(s) for s in decoded)}")
    if not result["matches"]:
        click.secho("Round trip mismatch", fg="red", err=True)
        raise SystemExit(1)
