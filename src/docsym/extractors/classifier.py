"""Classification of call sites into DSL declarations."""

from dataclasses import dataclass
from typing import Union

from docsym.extractors.dsl_table import DslTable
from docsym.models.syntax import Block, Call, Other, SyntaxNode


@dataclass(frozen=True)
class TestDeclaration:
    """``test "name" do ... end`` inside a test case class."""

    __test__ = False  # not a pytest class

    call: Call
    name_arg: SyntaxNode | None


@dataclass(frozen=True)
class LifecycleCallback:
    """``before_save :method`` and friends."""

    call: Call
    macro: str
    arguments: tuple[SyntaxNode, ...]
    block: Block | None


@dataclass(frozen=True)
class AttributeMacro:
    """``attr_reader :name, ...``."""

    call: Call
    arguments: tuple[SyntaxNode, ...]


@dataclass(frozen=True)
class Unrecognized:
    """Ordinary code."""

    call: Call


Recognition = Union[TestDeclaration, LifecycleCallback, AttributeMacro, Unrecognized]


def classify(call: Call, superclass: str | None, table: DslTable) -> Recognition:
    """
    Decide what a call declares.

    Test declarations win over lifecycle callbacks, which win over
    attribute macros, should a name ever appear in more than one set.
    Only calls on the implicit receiver or on ``self`` declare anything;
    ``record.before_save :x`` is ordinary code.

    Args:
        call: The call site.
        superclass: Declared superclass of the innermost open scope,
            or None outside a class or for modules.
        table: Recognized macro names.

    Returns:
        The recognition for this call.
    """
    if not _is_self_call(call):
        return Unrecognized(call=call)

    method = call.method

    if table.is_test_alias(method) and table.is_test_base(superclass):
        name_arg = call.arguments[0] if call.arguments else None
        return TestDeclaration(call=call, name_arg=name_arg)

    macro = table.callback(method)
    if macro is not None:
        return LifecycleCallback(
            call=call,
            macro=macro.name,
            arguments=call.arguments if macro.accepts_arguments else (),
            block=call.block if macro.accepts_block else None,
        )

    if table.is_attribute_macro(method):
        return AttributeMacro(call=call, arguments=call.arguments)

    return Unrecognized(call=call)


def _is_self_call(call: Call) -> bool:
    receiver = call.receiver
    return receiver is None or (isinstance(receiver, Other) and receiver.type == "self")
