"""
hackdisasm - Hack Disassembler Command-Line Interface
=====================================================

Turns Hack binary text back into assembly.

Usage Examples
--------------
Disassemble to stdout:
    $ hackdisasm Max.hack

Output to file:
    $ hackdisasm Max.hack -o Max.dis.asm

Show addresses and binary words next to each instruction:
    $ hackdisasm Max.hack --addresses
"""

from pathlib import Path
from typing import Optional

import click

from hack_sdk import __version__
from hack_sdk.cli.errors import handle_cli_exception
from hack_sdk.disassembler import HackDisassembler


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
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--addresses",
    is_flag=True,
    help="Prefix each instruction with its address and binary word",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    addresses: bool,
    verbose: bool,
) -> None:
    """
    Disassemble Hack binary text.

    INPUT_FILE is the .hack file to disassemble. Output assembles back
    to the same binary with hackasm.
    """
    try:
        lines = input_file.read_text(encoding="utf-8").splitlines()
        instructions = HackDisassembler().disassemble(lines)

        output_lines = [f"// Disassembly of {input_file.name}"]
        for instr in instructions:
            if addresses:
                output_lines.append(f"{instr.text:<16} // {instr.address:5d}: {instr.word}")
            else:
                output_lines.append(instr.text)
        result = "\n".join(output_lines) + "\n"

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        if verbose:
            click.echo(f"Instructions disassembled: {len(instructions)}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
