"""Storybook scaffolding: template emission and setup instructions."""

from .core import GeneratorOptions, StorybookGenerator
from .files import CreateResult, create_file
from .instructions import STEPS, InstructionStep, print_outcome, run_instructions
from .templates import FileMapping, SubstitutionContext, TemplateEngine

__all__ = [
    "CreateResult",
    "FileMapping",
    "GeneratorOptions",
    "InstructionStep",
    "STEPS",
    "StorybookGenerator",
    "SubstitutionContext",
    "TemplateEngine",
    "create_file",
    "print_outcome",
    "run_instructions",
]
