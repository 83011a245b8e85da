"""Wire protocol: framing and message assembly."""

from __future__ import annotations

from pytram._protocol.assembler import AssemblerState, MessageAssembler, Phase
from pytram._protocol.framing import ByteStream, FrameReader, encode_content, encode_message

__all__ = [
    "AssemblerState",
    "ByteStream",
    "FrameReader",
    "MessageAssembler",
    "Phase",
    "encode_content",
    "encode_message",
]
