"""Command line entry point: JSON request in, JSON response out."""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from ._errors import StrataRequestError
from ._pipeline import execute
from ._protocol import decode_request, encode_response
from ._store import ContainerStore
from ._types import AnalysisResponse

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = "./strata_data"


@click.command()
@click.version_option(version=__version__)
@click.option("--input", "input_json", help="JSON request; read from stdin when omitted.")
@click.option(
    "--store", "store_path", envvar="STRATA_STORE_PATH", default=DEFAULT_STORE_PATH,
    show_default=True, help="Result store directory for store-backed requests.",
)
@click.option("--no-store", is_flag=True, help="Run without a result store.")
@click.option("--pretty", is_flag=True, help="Indent the JSON response.")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(
    input_json: str | None,
    store_path: str,
    no_store: bool,
    pretty: bool,
    verbose: bool,
) -> None:
    """Structural text analysis.

    Reads one tagged request such as
    {"action": "Analyze", "text": "...", "extract_entities": true}
    and prints the response envelope.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    indent = 2 if pretty else None

    if input_json is None:
        input_json = click.get_text_stream("stdin").read()

    try:
        request = decode_request(input_json)
    except StrataRequestError as e:
        logger.error("%s", e)
        click.echo(encode_response(AnalysisResponse(success=False, error=str(e)), indent))
        sys.exit(1)

    store = None if no_store else ContainerStore(store_path)
    response = execute(request, store)
    click.echo(encode_response(response, indent))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
