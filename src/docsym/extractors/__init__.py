"""Outline extraction engine."""

from docsym.extractors.builder import Scope, SymbolTreeBuilder
from docsym.extractors.classifier import (
    AttributeMacro,
    LifecycleCallback,
    Recognition,
    TestDeclaration,
    Unrecognized,
    classify,
)
from docsym.extractors.dsl_table import (
    DEFAULT_DSL_TABLE,
    CallbackFamily,
    CallbackMacro,
    DslTable,
    get_default_dsl_table,
)
from docsym.extractors.naming import ANONYMOUS, constant_name, name_of
from docsym.extractors.outline import extract_symbols

__all__ = [
    "ANONYMOUS",
    "DEFAULT_DSL_TABLE",
    "AttributeMacro",
    "CallbackFamily",
    "CallbackMacro",
    "DslTable",
    "LifecycleCallback",
    "Recognition",
    "Scope",
    "SymbolTreeBuilder",
    "TestDeclaration",
    "Unrecognized",
    "classify",
    "constant_name",
    "extract_symbols",
    "get_default_dsl_table",
    "name_of",
]
