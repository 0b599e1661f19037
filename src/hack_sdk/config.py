"""
Hack SDK - Configuration
========================

Assembler configuration: memory layout constants and output naming.
Configuration can come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Command-line flags (the CLI builds a config and passes it down)

The defaults describe the standard Hack memory map:
- RAM[0..15]        virtual registers R0-R15
- RAM[16..16383]    static variables
- RAM[16384..24575] screen memory map (SCREEN)
- RAM[24576]        keyboard memory map (KBD)
"""

from dataclasses import dataclass
import os

from hack_sdk.cpu import MAX_ADDRESS_VALUE


@dataclass(frozen=True)
class AssemblerConfig:
    """
    Configuration for a single assembly run.

    Attributes:
        variable_base: First address handed to a new variable (default: 16)
        screen_base: Variables must stay strictly below this (default: 16384)
        max_address: Largest encodable address numeral (default: 32767)
        hack_suffix: Suffix for binary output files (default: ".hack")
    """

    variable_base: int = 16
    screen_base: int = 16384
    max_address: int = 32767
    hack_suffix: str = ".hack"

    def __post_init__(self) -> None:
        if not 0 <= self.max_address <= MAX_ADDRESS_VALUE:
            raise ValueError(
                f"max_address must be between 0 and {MAX_ADDRESS_VALUE}, "
                f"got {self.max_address}"
            )

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            HACK_VARIABLE_BASE: first variable address
            HACK_SCREEN_BASE: upper bound (exclusive) for variables
            HACK_MAX_ADDRESS: largest address numeral

        Returns:
            AssemblerConfig with environment overrides applied
        """
        defaults = cls()
        return cls(
            variable_base=int(os.environ.get("HACK_VARIABLE_BASE", defaults.variable_base)),
            screen_base=int(os.environ.get("HACK_SCREEN_BASE", defaults.screen_base)),
            max_address=int(os.environ.get("HACK_MAX_ADDRESS", defaults.max_address)),
            hack_suffix=defaults.hack_suffix,
        )


DEFAULT_CONFIG = AssemblerConfig()
