"""Tests for DSL call classification."""

from docsym.extractors.classifier import (
    AttributeMacro,
    LifecycleCallback,
    TestDeclaration,
    Unrecognized,
    classify,
)
from docsym.extractors.dsl_table import DEFAULT_DSL_TABLE, CallbackMacro
from docsym.models.symbols import SourceRange
from docsym.models.syntax import Block, Call, Other, StringLiteral, SymbolLiteral

R = SourceRange.from_points(1, 2, 3, 5)
NAME = StringLiteral(range=R, fragments=("an example",))


def _call(method: str, arguments=(), block: Block | None = None) -> Call:
    return Call(range=R, method=method, message_range=R, arguments=arguments, block=block)


class TestTestDeclarations:
    """test / it inside test cases."""

    def test_test_in_test_case(self) -> None:
        result = classify(_call("test", (NAME,)), "ActiveSupport::TestCase", DEFAULT_DSL_TABLE)
        assert isinstance(result, TestDeclaration)
        assert result.name_arg is NAME

    def test_it_alias(self) -> None:
        result = classify(_call("it", (NAME,)), "ActiveSupport::TestCase", DEFAULT_DSL_TABLE)
        assert isinstance(result, TestDeclaration)

    def test_missing_name(self) -> None:
        result = classify(_call("test", block=Block(range=R)), "Minitest::TestCase", DEFAULT_DSL_TABLE)
        assert isinstance(result, TestDeclaration)
        assert result.name_arg is None

    def test_only_first_argument_names_the_test(self) -> None:
        other = StringLiteral(range=R, fragments=("ignored",))
        result = classify(_call("test", (NAME, other)), "TestCase", DEFAULT_DSL_TABLE)
        assert isinstance(result, TestDeclaration)
        assert result.name_arg is NAME

    def test_requires_test_case_superclass(self) -> None:
        result = classify(_call("test", (NAME,)), "ApplicationRecord", DEFAULT_DSL_TABLE)
        assert isinstance(result, Unrecognized)

    def test_requires_a_superclass(self) -> None:
        assert isinstance(classify(_call("test", (NAME,)), None, DEFAULT_DSL_TABLE), Unrecognized)

    def test_suffix_not_substring(self) -> None:
        result = classify(_call("test", (NAME,)), "TestCaseHelpers", DEFAULT_DSL_TABLE)
        assert isinstance(result, Unrecognized)

    def test_test_wins_over_callback_with_same_name(self) -> None:
        table = DEFAULT_DSL_TABLE.with_callbacks(CallbackMacro(name="test"))
        result = classify(_call("test", (NAME,)), "ActiveSupport::TestCase", table)
        assert isinstance(result, TestDeclaration)

    def test_colliding_name_falls_back_to_callback_outside_test_cases(self) -> None:
        table = DEFAULT_DSL_TABLE.with_callbacks(CallbackMacro(name="test"))
        result = classify(_call("test", (NAME,)), "ApplicationRecord", table)
        assert isinstance(result, LifecycleCallback)


class TestLifecycleCallbacks:
    """Rails callback macros."""

    def test_callback_with_arguments(self) -> None:
        args = (SymbolLiteral(range=R, value="a"), SymbolLiteral(range=R, value="b"))
        result = classify(_call("before_save", args), None, DEFAULT_DSL_TABLE)
        assert isinstance(result, LifecycleCallback)
        assert result.macro == "before_save"
        assert result.arguments == args
        assert result.block is None

    def test_callback_with_block(self) -> None:
        block = Block(range=R)
        result = classify(_call("before_action", block=block), "ApplicationController", DEFAULT_DSL_TABLE)
        assert isinstance(result, LifecycleCallback)
        assert result.arguments == ()
        assert result.block is block

    def test_callbacks_ignore_superclass(self) -> None:
        result = classify(_call("before_perform"), "Anything", DEFAULT_DSL_TABLE)
        assert isinstance(result, LifecycleCallback)

    def test_macro_flags_filter_call_shape(self) -> None:
        table = DEFAULT_DSL_TABLE.with_callbacks(
            CallbackMacro(name="on_ready", accepts_arguments=False, accepts_block=True)
        )
        block = Block(range=R)
        result = classify(_call("on_ready", (NAME,), block), None, table)
        assert isinstance(result, LifecycleCallback)
        assert result.arguments == ()
        assert result.block is block


class TestOtherCalls:
    """Attribute macros and ordinary code."""

    def test_attribute_macro(self) -> None:
        args = (SymbolLiteral(range=R, value="name"),)
        result = classify(_call("attr_reader", args), None, DEFAULT_DSL_TABLE)
        assert isinstance(result, AttributeMacro)
        assert result.arguments == args

    def test_unrecognized(self) -> None:
        call = _call("unrecognized_callback", (SymbolLiteral(range=R, value="x"),))
        result = classify(call, "ApplicationJob", DEFAULT_DSL_TABLE)
        assert isinstance(result, Unrecognized)
        assert result.call is call


class TestReceivers:
    """Only implicit and self receivers declare anything."""

    def _with_receiver(self, method: str, receiver_type: str) -> Call:
        return Call(
            range=R,
            method=method,
            message_range=R,
            arguments=(SymbolLiteral(range=R, value="x"),),
            receiver=Other(range=R, type=receiver_type),
        )

    def test_self_receiver_callback(self) -> None:
        result = classify(self._with_receiver("before_save", "self"), None, DEFAULT_DSL_TABLE)
        assert isinstance(result, LifecycleCallback)

    def test_object_receiver_callback(self) -> None:
        call = self._with_receiver("before_save", "identifier")
        assert isinstance(classify(call, None, DEFAULT_DSL_TABLE), Unrecognized)

    def test_constant_receiver_test(self) -> None:
        call = self._with_receiver("it", "constant")
        result = classify(call, "ActiveSupport::TestCase", DEFAULT_DSL_TABLE)
        assert isinstance(result, Unrecognized)

    def test_object_receiver_attribute_macro(self) -> None:
        call = self._with_receiver("attr_reader", "identifier")
        assert isinstance(classify(call, None, DEFAULT_DSL_TABLE), Unrecognized)
