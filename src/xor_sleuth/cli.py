from typing import NoReturn

import click

from xor_sleuth.algorithm.coincidence import format_coincidence, index_of_coincidence
from xor_sleuth.algorithm.key_search import brute_force
from xor_sleuth.errors import NoCandidateError, XorSleuthError
from xor_sleuth.log_config import LOG_LEVELS, configure_logging
from xor_sleuth.ui import get_console, key_table, show_search
from xor_sleuth.utils import (
    decode_ciphertext,
    load_ciphertext,
    parse_key_byte,
    trim_input,
    xor_bytes,
    CIPHERTEXT_FORMATS,
    CiphertextFormat,
)


def fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    help="Minimum level of log events written to stderr",
)
def cli(log_level: str):
    configure_logging(log_level)


@cli.command()
@click.argument("ciphertext_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--ciphertext-format",
    "-f",
    type=click.Choice(CIPHERTEXT_FORMATS),
    default="hex",
)
@click.option(
    "--allowable-errors",
    "-e",
    type=click.IntRange(min=0),
    default=1,
    help="Score keys whose decode has fewer than this many non-printable bytes",
)
@click.option("--ignore-errors", "-i", is_flag=True, help="Score every key regardless of printability")
@click.option("--quiet", "-q", is_flag=True, help="Only show the best key")
def crack(
    ciphertext_path: str,
    ciphertext_format: CiphertextFormat,
    allowable_errors: int,
    ignore_errors: bool,
    quiet: bool,
):
    """Recover the key of a single-byte XOR ciphertext."""
    console = get_console()

    with open(ciphertext_path, "rb") as f:
        encoded = trim_input(f.read())
    if ciphertext_format != "raw":
        console.print(f"Found {len(encoded)} bytes of {ciphertext_format}-encoded ciphertext")

    try:
        ciphertext = decode_ciphertext(encoded, ciphertext_format)
    except XorSleuthError as e:
        fail(str(e))

    console.print(f"Found {len(ciphertext)} bytes of ciphertext")

    try:
        outcome = brute_force(ciphertext, allowable_errors, ignore_errors=ignore_errors)
    except NoCandidateError as e:
        if not quiet:
            get_console(stderr=True).print(key_table(e.diagnostics))
        fail(f"{e}; try a larger --allowable-errors or --ignore-errors")
    except XorSleuthError as e:
        fail(str(e))

    show_search(console, outcome, show_keys=not quiet)


@cli.command()
@click.argument("key")
@click.argument("plaintext_path", type=click.Path(exists=True, dir_okay=False))
def encode(key: str, plaintext_path: str):
    """XOR a file with a hex KEY byte and print the hex ciphertext."""
    try:
        key_byte = parse_key_byte(key)
    except XorSleuthError as e:
        fail(str(e))

    with open(plaintext_path, "rb") as f:
        plaintext = trim_input(f.read())

    click.echo(xor_bytes(plaintext, key_byte).hex())


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--hex", "-x", "read_hex", is_flag=True, help="Read the input as ASCII hex")
def ic(input_path: str, read_hex: bool):
    """Print the byte count and index of coincidence of a file."""
    try:
        buffer = load_ciphertext(input_path, "hex" if read_hex else "raw")
        n, coincidence = index_of_coincidence(buffer)
    except XorSleuthError as e:
        fail(str(e))

    click.echo(format_coincidence(n, coincidence))


if __name__ == "__main__":
    cli()
