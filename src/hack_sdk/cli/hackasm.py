"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly:
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Generate all output files:
    $ hackasm Pong.asm -o Pong.hack -l Pong.lst -s Pong.sym

Verbose mode:
    $ hackasm -v Pong.asm

Memory layout can be overridden through the environment
(HACK_VARIABLE_BASE, HACK_SCREEN_BASE, HACK_MAX_ADDRESS).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from hack_sdk import __version__
from hack_sdk.assembler import Assembler
from hack_sdk.cli.errors import ExitCode, handle_cli_exception
from hack_sdk.config import AssemblerConfig


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
    help="Output .hack file (default: input.hack)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file (labels and variables)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    listing: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into Hack binary text.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm -s Max.sym Max.asm   # Also write the symbol table
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = AssemblerConfig.from_env()
    except ValueError as e:
        click.echo(f"Error: invalid HACK_* environment setting: {e}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    output_file = output if output is not None else input_file.with_suffix(config.hack_suffix)
    asm = Assembler(config)

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        code = asm.assemble_file(input_file)

        # Nothing is written unless assembly succeeded
        asm.write_hack(output_file)
        if verbose:
            click.echo(f"Wrote {len(code)} instructions to {output_file}")

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            table = asm.get_symbol_table()
            click.echo(
                f"Assembly complete: {len(code)} instructions, "
                f"{len(table.labels())} labels, {len(table.variables())} variables"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
