"""
y86asm - Y86 Assembler Command-Line Interface
=============================================

This module implements the command-line interface for the Y86
assembler.

Usage Examples
--------------
Basic assembly (writes prog.yo):
    $ y86asm prog.ys

With output file:
    $ y86asm prog.ys -o out.yo

Listing, symbol table and memory image:
    $ y86asm prog.ys -o prog.yo -s prog.sym -b prog.bin

Fail on typos instead of skipping the line:
    $ y86asm --strict prog.ys

Nothing is written unless the whole source assembles.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from y86asm import __version__
from y86asm.assembler import Assembler
from y86asm.cli.errors import handle_cli_exception
from y86asm.config import get_default_config


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output listing file (default: input.yo)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file",
)
@click.option(
    "-b", "--binary",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate memory image (bytes laid out at their addresses)",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on lines that are neither directive nor instruction. "
         "Default: lenient (skip with a warning), or Y86ASM_STRICT.",
)
@click.option(
    "--check-overlaps/--no-check-overlaps",
    default=None,
    help="Fail when .pos makes two emissions share an address. "
         "Default: off, or Y86ASM_CHECK_OVERLAPS.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="y86asm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    binary: Optional[Path],
    strict: Optional[bool],
    check_overlaps: Optional[bool],
    verbose: bool,
) -> None:
    """
    Assemble Y86 source code into an object-code listing.

    INPUT_FILE is the assembly source file to assemble.

    \b
    Examples:
        y86asm prog.ys               # Outputs prog.yo
        y86asm prog.ys -o out.yo     # Specify output file
        y86asm prog.ys -s prog.sym   # Also write the symbol table
    """
    setup_logging(verbose)

    config = get_default_config()
    output_file = output if output is not None else input_file.with_suffix(config.listing_suffix)

    asm = Assembler(config=config, strict=strict, check_overlaps=check_overlaps)

    if verbose:
        click.echo(f"Strict mode: {'enabled' if asm.config.strict else 'disabled'}")
        click.echo(f"Overlap check: {'enabled' if asm.config.check_overlaps else 'disabled'}")

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        # Assembly finishes completely before any file is written
        listing = asm.assemble_file(input_file)

        # Skipped lines are already logged in verbose mode
        if not verbose:
            for warning in asm.get_warnings():
                click.echo(f"Warning: {warning}", err=True)

        asm.write_listing(output_file)
        if verbose:
            click.echo(f"Wrote {len(listing)} records to {output_file}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if binary:
            size = asm.write_binary(binary)
            if verbose:
                click.echo(f"Wrote {size} bytes to {binary}")

        if verbose:
            click.echo(f"Defined {len(asm.get_symbols())} symbols")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
