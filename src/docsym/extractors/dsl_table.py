"""Recognized DSL macros.

The table is data, not behavior: the classifier only asks it
whether a method name is a test alias, a lifecycle callback or
an attribute macro. Extend it through DslConfig or with_callbacks()
rather than editing the engine.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class CallbackFamily(StrEnum):
    """Framework area a lifecycle callback belongs to."""

    MODEL = "model"
    CONTROLLER = "controller"
    JOB = "job"
    CUSTOM = "custom"


class CallbackMacro(BaseModel):
    """A lifecycle callback macro and the call shapes it takes."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    family: CallbackFamily = CallbackFamily.CUSTOM
    accepts_arguments: bool = True
    accepts_block: bool = True


MODEL_CALLBACKS: tuple[str, ...] = (
    "after_commit",
    "after_create",
    "after_create_commit",
    "after_destroy",
    "after_destroy_commit",
    "after_find",
    "after_initialize",
    "after_rollback",
    "after_save",
    "after_save_commit",
    "after_touch",
    "after_update",
    "after_update_commit",
    "after_validation",
    "around_create",
    "around_destroy",
    "around_save",
    "around_update",
    "before_create",
    "before_destroy",
    "before_save",
    "before_update",
    "before_validation",
)

CONTROLLER_CALLBACKS: tuple[str, ...] = (
    "after_action",
    "append_after_action",
    "append_around_action",
    "append_before_action",
    "around_action",
    "before_action",
    "prepend_after_action",
    "prepend_around_action",
    "prepend_before_action",
    "skip_after_action",
    "skip_around_action",
    "skip_before_action",
)

JOB_CALLBACKS: tuple[str, ...] = (
    "after_enqueue",
    "after_perform",
    "around_enqueue",
    "around_perform",
    "before_enqueue",
    "before_perform",
)

TEST_ALIASES: tuple[str, ...] = ("test", "it")

TEST_BASE_SUFFIX = "TestCase"

ATTRIBUTE_MACROS: tuple[str, ...] = ("attr_reader", "attr_writer", "attr_accessor")


class DslTable(BaseModel):
    """Read-only lookup table handed to the extraction engine."""

    model_config = ConfigDict(frozen=True)

    test_aliases: frozenset[str] = frozenset(TEST_ALIASES)
    test_base_suffix: str = TEST_BASE_SUFFIX
    callbacks: dict[str, CallbackMacro] = Field(default_factory=dict)
    attribute_macros: frozenset[str] = frozenset(ATTRIBUTE_MACROS)

    def is_test_alias(self, method: str) -> bool:
        """Check if method declares a test."""
        return method in self.test_aliases

    def is_test_base(self, superclass: str | None) -> bool:
        """Check if a declared superclass name looks like a test base class."""
        if not superclass or not self.test_base_suffix:
            return False
        return superclass.endswith(self.test_base_suffix)

    def callback(self, method: str) -> CallbackMacro | None:
        """Look up a lifecycle callback macro by name."""
        return self.callbacks.get(method)

    def is_attribute_macro(self, method: str) -> bool:
        """Check if method declares attribute accessors."""
        return method in self.attribute_macros

    def with_callbacks(self, *macros: CallbackMacro) -> "DslTable":
        """Return a copy with additional (or replaced) callback macros."""
        callbacks = dict(self.callbacks)
        for macro in macros:
            callbacks[macro.name] = macro
        return self.model_copy(update={"callbacks": callbacks})

    def without_callbacks(self, *names: str) -> "DslTable":
        """Return a copy with the named callback macros removed."""
        callbacks = {k: v for k, v in self.callbacks.items() if k not in names}
        return self.model_copy(update={"callbacks": callbacks})


def _family(names: tuple[str, ...], family: CallbackFamily) -> dict[str, CallbackMacro]:
    return {name: CallbackMacro(name=name, family=family) for name in names}


def get_default_dsl_table() -> DslTable:
    """Build the table of Rails callbacks and Minitest test aliases."""
    callbacks: dict[str, CallbackMacro] = {}
    callbacks.update(_family(MODEL_CALLBACKS, CallbackFamily.MODEL))
    callbacks.update(_family(CONTROLLER_CALLBACKS, CallbackFamily.CONTROLLER))
    callbacks.update(_family(JOB_CALLBACKS, CallbackFamily.JOB))
    return DslTable(callbacks=callbacks)


DEFAULT_DSL_TABLE = get_default_dsl_table()
