"""Tests for the DSL lookup table."""

import pytest
from pydantic import ValidationError

from docsym.extractors.dsl_table import (
    CONTROLLER_CALLBACKS,
    DEFAULT_DSL_TABLE,
    JOB_CALLBACKS,
    MODEL_CALLBACKS,
    CallbackFamily,
    CallbackMacro,
    DslTable,
    get_default_dsl_table,
)


class TestDefaultTable:
    """Tests for the built-in Rails table."""

    @pytest.mark.parametrize("name", MODEL_CALLBACKS + CONTROLLER_CALLBACKS + JOB_CALLBACKS)
    def test_every_rails_callback_is_known(self, name: str) -> None:
        assert DEFAULT_DSL_TABLE.callback(name) is not None

    def test_families(self) -> None:
        assert DEFAULT_DSL_TABLE.callback("before_save").family == CallbackFamily.MODEL
        assert DEFAULT_DSL_TABLE.callback("before_action").family == CallbackFamily.CONTROLLER
        assert DEFAULT_DSL_TABLE.callback("after_perform").family == CallbackFamily.JOB

    def test_callback_count(self) -> None:
        assert len(DEFAULT_DSL_TABLE.callbacks) == 41

    def test_unknown_callback(self) -> None:
        assert DEFAULT_DSL_TABLE.callback("unrecognized_callback") is None
        assert DEFAULT_DSL_TABLE.callback("validates") is None

    def test_test_aliases(self) -> None:
        assert DEFAULT_DSL_TABLE.is_test_alias("test")
        assert DEFAULT_DSL_TABLE.is_test_alias("it")
        assert not DEFAULT_DSL_TABLE.is_test_alias("describe")

    def test_attribute_macros(self) -> None:
        assert DEFAULT_DSL_TABLE.is_attribute_macro("attr_reader")
        assert not DEFAULT_DSL_TABLE.is_attribute_macro("attribute")

    def test_factory_builds_equal_tables(self) -> None:
        assert get_default_dsl_table() == DEFAULT_DSL_TABLE


class TestIsTestBase:
    """Tests for the superclass suffix check."""

    @pytest.mark.parametrize(
        "superclass",
        ["ActiveSupport::TestCase", "ActionDispatch::IntegrationTestCase", "TestCase"],
    )
    def test_test_bases(self, superclass: str) -> None:
        assert DEFAULT_DSL_TABLE.is_test_base(superclass)

    @pytest.mark.parametrize("superclass", [None, "", "ApplicationRecord", "TestCaseHelper"])
    def test_not_test_bases(self, superclass: str | None) -> None:
        assert not DEFAULT_DSL_TABLE.is_test_base(superclass)

    def test_empty_suffix_matches_nothing(self) -> None:
        table = DslTable(test_base_suffix="")
        assert not table.is_test_base("ActiveSupport::TestCase")


class TestCopies:
    """Tests for with_callbacks and without_callbacks."""

    def test_with_callbacks_returns_copy(self) -> None:
        extended = DEFAULT_DSL_TABLE.with_callbacks(CallbackMacro(name="after_publish"))

        assert extended.callback("after_publish") is not None
        assert DEFAULT_DSL_TABLE.callback("after_publish") is None

    def test_with_callbacks_replaces(self) -> None:
        replaced = DEFAULT_DSL_TABLE.with_callbacks(
            CallbackMacro(name="before_save", accepts_block=False)
        )

        assert replaced.callback("before_save").accepts_block is False

    def test_without_callbacks(self) -> None:
        trimmed = DEFAULT_DSL_TABLE.without_callbacks("before_save", "not_there")

        assert trimmed.callback("before_save") is None
        assert trimmed.callback("after_save") is not None
        assert DEFAULT_DSL_TABLE.callback("before_save") is not None

    def test_table_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_DSL_TABLE.test_base_suffix = "Spec"

    def test_macro_name_required(self) -> None:
        with pytest.raises(ValidationError):
            CallbackMacro(name="")
