# src/opcode_dispatch_gen/arch/mos6502/__init__.py
"""
MOS 6502 Architecture Package
"""
from .addressing import AddressingModeRegistry, ModeCapability, DEFAULT_CAPABILITIES
from .reference import DEFAULT_OPCODE_REFERENCE, is_placeholder
