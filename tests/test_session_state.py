import pytest

from cia.domain.enums import NOT_SET_LABEL, Council
from cia.features.regions.classifier import classify
from cia.features.session.errors import SessionError
from cia.features.session.state import (
    apply_classification,
    cancel_icmp,
    confirm_icmp,
    new_session,
    selected_figures,
    with_checkpoint,
    with_council,
    with_figure_selected,
    with_project,
)
from cia.features.session.store import SessionStore

PROJECT = "Te Awa Industrial Upgrade - Stage 2"


def _pending_state():
    s = with_project(new_session(PROJECT), location="Beerescourt near Rotokauri")
    return apply_classification(s, classify(s.project_location, s.council))


def test_new_session_defaults() -> None:
    s = new_session(PROJECT)

    assert s.icmp_label == NOT_SET_LABEL
    assert s.council is Council.hamilton
    assert s.include_checkpoint is True
    assert s.pending is None
    assert len(s.figures) == 8
    assert [f.id for f in selected_figures(s)] == ["fig-1", "fig-2", "fig-3"]


def test_resolved_classification_sets_label() -> None:
    s = with_project(new_session(PROJECT), location="Frankton")
    s2 = apply_classification(s, classify(s.project_location, s.council))

    assert s2.icmp_label == "Waitawhiriwhiri ICMP"
    assert s2.pending is None
    assert s.icmp_label == NOT_SET_LABEL


def test_pending_does_not_commit_label() -> None:
    s = _pending_state()

    assert s.icmp_label == NOT_SET_LABEL
    assert s.pending is not None
    assert s.pending.candidates == ("Rotokauri ICMP", "Waitawhiriwhiri ICMP")


def test_confirm_without_choice_uses_default() -> None:
    s = confirm_icmp(_pending_state())

    assert s.icmp_label == "Rotokauri ICMP"
    assert s.pending is None


def test_confirm_with_explicit_choice() -> None:
    s = confirm_icmp(_pending_state(), "Waitawhiriwhiri ICMP")
    assert s.icmp_label == "Waitawhiriwhiri ICMP"


def test_confirm_rejects_non_candidate() -> None:
    with pytest.raises(SessionError) as exc:
        confirm_icmp(_pending_state(), "Huntly ICMP")
    assert exc.value.code == "invalid_icmp_choice"


def test_confirm_without_pending_fails() -> None:
    with pytest.raises(SessionError) as exc:
        confirm_icmp(new_session(PROJECT))
    assert exc.value.code == "no_pending_classification"


def test_cancel_keeps_previous_label() -> None:
    s = with_project(new_session(PROJECT), location="Peacocke")
    s = apply_classification(s, classify(s.project_location, s.council))
    s = with_project(s, location="Beerescourt near Rotokauri")
    s = apply_classification(s, classify(s.project_location, s.council))

    s = cancel_icmp(s)

    assert s.icmp_label == "Peacocke ICMP"
    assert s.pending is None


def test_council_switch_resets_toggle_and_clears_pending() -> None:
    s = with_council(_pending_state(), Council.waikato)

    assert s.council is Council.waikato
    assert s.include_checkpoint is False
    assert s.pending is None
    assert s.icmp_label == NOT_SET_LABEL

    back = with_council(with_checkpoint(s, False), Council.hamilton)
    assert back.include_checkpoint is True


def test_checkpoint_unavailable_for_waikato() -> None:
    s = with_council(new_session(PROJECT), Council.waikato)

    with pytest.raises(SessionError) as exc:
        with_checkpoint(s, True)
    assert exc.value.code == "checkpoint_unavailable"
    assert with_checkpoint(s, False).include_checkpoint is False


def test_figure_selection() -> None:
    s = with_figure_selected(new_session(PROJECT), "fig-1", False)
    s = with_figure_selected(s, "fig-7", True)

    assert [f.id for f in selected_figures(s)] == ["fig-2", "fig-3", "fig-7"]

    with pytest.raises(SessionError) as exc:
        with_figure_selected(s, "fig-99", True)
    assert exc.value.code == "figure_not_found"


def test_store_isolates_sessions_and_keeps_failed_transition_out() -> None:
    store = SessionStore(project_name=PROJECT, council=Council.hamilton)

    store.update("a", lambda s: with_project(s, name="A"))
    assert store.get("a").project_name == "A"
    assert store.get("b").project_name == PROJECT

    def boom(s):
        raise SessionError("checkpoint_unavailable")

    with pytest.raises(SessionError):
        store.update("a", boom)
    assert store.get("a").project_name == "A"

    store.reset("a")
    assert store.get("a").project_name == PROJECT


def test_store_reads_do_not_create_entries() -> None:
    store = SessionStore(project_name=PROJECT, council=Council.waikato)

    for i in range(50):
        s = store.get(f"reader-{i}")
        assert s.council is Council.waikato
    assert len(store) == 0

    store.update("writer", lambda s: with_project(s, location="Huntly"))
    assert len(store) == 1
    assert store.reset("writer") is True
    assert store.reset("writer") is False
    assert len(store) == 0
