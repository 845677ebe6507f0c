import pytest

from mtx.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeySequence,
    KeymapConflictError,
    KeymapRegistry,
    bind,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_sequence(*keys: str) -> KeySequence:
    return KeySequence.from_strings(*keys)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    sequence: KeySequence | None = None,
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=sequence or make_sequence("g", "g"),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    binding = make_binding(binding_id="normal.gg")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    binding = make_binding(binding_id="normal.gg")
    registry.register_binding(binding)

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.gg.duplicate"))


def test_same_sequence_in_other_mode_is_allowed() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.gg"))
    registry.register_binding(make_binding(binding_id="visual.gg", mode="visual"))

    assert registry.stats().modes == ("normal", "visual")


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_duplicate_binding_id_is_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="binding"))

    with pytest.raises(ValueError):
        registry.register_binding(
            make_binding(binding_id="binding", sequence=make_sequence("x"))
        )


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.unregister_binding("binding") is None


def test_sequence_tokens_are_normalized() -> None:
    sequence = make_sequence("Ctrl+d")

    assert sequence.tokens == ("ctrl+d",)
    assert make_sequence("d", "d").signature == "d d"


def test_bind_helper_builds_mode_scoped_id() -> None:
    binding = bind("normal", ("g", "g"), "motion.document_start")

    assert binding.id == "normal.g_g"
    assert binding.mode == "normal"


def test_load_default_keymaps_registers_every_mode() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
    assert registry.stats().modes == ("command", "insert", "normal", "visual")
    assert registry.get_binding("normal.d_d").action_id == "edit.delete_line"
    assert registry.get_binding("command.ENTER").action_id == "command.submit_line"


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    custom = bind("normal", ("q",), "core.enter_insert")

    load_default_keymaps(
        registry, exclude_bindings=("normal.i",), extra_bindings=(custom,)
    )

    with pytest.raises(KeyError):
        registry.get_binding("normal.i")
    assert registry.lookup("normal", "q") == custom
