"""Tests FormSession — saisie en attente + mutations de la liste."""
import pytest

from survey_builder import (
    FormSession, BlockVariant, RequiredFlag,
    DuplicateButton, EmptyName, InvalidChoiceGroup, InvalidCount, BlockValidationError,
)


def add(session, name, variant=BlockVariant.TEXT, **kw):
    session.set_name(name)
    session.set_variant(variant)
    if "required" in kw:
        session.set_required(kw["required"])
    return session.add_block()


@pytest.fixture
def session():
    return FormSession()


def test_new_session_is_empty(session):
    assert session.blocks == ()
    assert session.has_blocks is False
    assert session.pending.variant == BlockVariant.TEXT
    assert session.pending.required == RequiredFlag.NO


def test_add_block_appends_and_resets_pending(session):
    b = add(session, "Prénom", required=RequiredFlag.YES)
    assert session.blocks == (b,)
    assert b.required is True
    assert session.has_blocks is True
    assert session.pending.name == ""
    assert session.pending.variant == BlockVariant.TEXT


def test_failed_add_keeps_list_and_pending(session):
    add(session, "Envoyer", BlockVariant.BUTTON)
    session.set_name("Encore")
    session.set_variant(BlockVariant.BUTTON)
    with pytest.raises(DuplicateButton):
        session.add_block()
    assert len(session.blocks) == 1
    assert session.pending.name == "Encore"


def test_has_blocks_stays_false_on_failure(session):
    with pytest.raises(EmptyName):
        session.add_block()
    assert session.has_blocks is False


def test_try_add_block_returns_error(session):
    result = session.try_add_block()
    assert isinstance(result, BlockValidationError)
    assert result.kind == "empty_name"


def test_title_added_last_is_pinned(session):
    a = add(session, "Email", BlockVariant.EMAIL)
    t = add(session, "Sondage", BlockVariant.TITLE)
    assert session.blocks == (t, a)


def test_blocks_snapshot_is_immutable(session):
    add(session, "A")
    with pytest.raises(TypeError):
        session.blocks[0] = None


# ── Groupes de choix ─────────────────────────────────────────────────────────

def test_choice_group_flow(session):
    session.set_name("Couleur")
    session.set_variant(BlockVariant.RADIO_GROUP)
    session.set_choice_count(2)
    session.set_choice_label(0, "Rouge")
    with pytest.raises(InvalidChoiceGroup):
        session.add_block()

    session.set_choice_label(1, "Bleu")
    b = session.add_block()
    assert b.choice_labels == ("Rouge", "Bleu")
    assert session.pending.choice_count == 0
    assert session.pending.choice_labels == []


def test_set_choice_count_resizes_labels(session):
    session.set_choice_count(2)
    session.set_choice_label(0, "a")
    session.set_choice_label(1, "b")
    assert session.set_choice_count("4") == ["a", "b", "", ""]
    assert session.set_choice_count(1) == ["a"]
    assert session.pending.choice_count == 1


def test_invalid_choice_count_leaves_pending(session):
    session.set_choice_count(2)
    with pytest.raises(InvalidCount):
        session.set_choice_count(-1)
    assert session.pending.choice_count == 2
    assert len(session.pending.choice_labels) == 2


# ── Options de liste déroulante ──────────────────────────────────────────────

def test_add_and_remove_options(session):
    assert session.add_option("   ") is False
    assert session.add_option("Lyon") is True
    assert session.add_option("Paris") is True
    assert session.remove_option(0) == "Lyon"
    assert session.pending.options == ["Paris"]


def test_dropdown_flow(session):
    session.set_name("Ville")
    session.set_variant(BlockVariant.DROPDOWN)
    session.add_option("Paris")
    b = session.add_block()
    assert b.options == ("Paris",)
    assert session.pending.options == []


# ── Réordonnancement ─────────────────────────────────────────────────────────

def test_move_block_replaces_list(session):
    a = add(session, "A")
    b = add(session, "B")
    c = add(session, "C")
    out = session.move_block(2, 0)
    assert session.blocks == (c, a, b)
    assert out == [c, a, b]


def test_drag_gesture_on_session(session):
    t = add(session, "Titre", BlockVariant.TITLE)
    a = add(session, "A")
    b = add(session, "B")
    gesture = session.start_drag(2)
    gesture.hover(1)
    gesture.hover(0)
    gesture.release()
    assert session.blocks == (t, b, a)


def test_required_flag_dropped_after_switch_to_dropdown(session):
    session.set_name("Ville")
    session.set_required(RequiredFlag.YES)
    session.set_variant(BlockVariant.DROPDOWN)
    session.add_option("Paris")
    b = session.add_block()
    assert b.required is False


def test_start_drag_out_of_range(session):
    add(session, "A")
    with pytest.raises(IndexError):
        session.start_drag(1)
