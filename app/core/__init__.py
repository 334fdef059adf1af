"""Core business logic."""
from app.core.abbreviator import abbreviate
from app.core.code_assembler import assemble_code
from app.core.code_generator import CodeGenerator
from app.core.code_schemes import CodeScheme, EntityType, PrefixStyle, build_schemes
from app.core.sequence_resolver import SequenceResolver

__all__ = [
    "CodeGenerator",
    "CodeScheme",
    "EntityType",
    "PrefixStyle",
    "SequenceResolver",
    "abbreviate",
    "assemble_code",
    "build_schemes",
]
