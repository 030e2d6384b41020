from cia.domain.enums import Council
from cia.features.selfcheck.checks import PASSED, run_self_checks
from cia.features.session.state import new_session, with_council, with_figure_selected

PROJECT = "Te Awa Industrial Upgrade - Stage 2"


def test_default_session_passes(repository) -> None:
    assert run_self_checks(new_session(PROJECT), repository) == PASSED


def test_waikato_session_passes(repository) -> None:
    s = with_council(new_session(PROJECT), Council.waikato)
    assert run_self_checks(s, repository) == PASSED


def test_no_selected_figures_fails(repository) -> None:
    s = new_session(PROJECT)
    for fid in ("fig-1", "fig-2", "fig-3"):
        s = with_figure_selected(s, fid, False)

    assert run_self_checks(s, repository) == "Test failure: No figures selected"


def test_self_checks_do_not_change_state(repository) -> None:
    s = new_session(PROJECT)
    run_self_checks(s, repository)
    assert s == new_session(PROJECT)


class _FixedFindings:
    def __init__(self, findings) -> None:
        self._findings = tuple(findings)

    def all(self):
        return self._findings


def test_extra_category_fails(repository) -> None:
    findings = repository.all()
    extra = findings[0].model_copy(update={"category": "rongoā"})

    result = run_self_checks(new_session(PROJECT), _FixedFindings([*findings, extra]))

    assert result == "Test failure: Unexpected category set"


def test_missing_category_fails(repository) -> None:
    result = run_self_checks(new_session(PROJECT), _FixedFindings(repository.all()[:-1]))

    assert result == "Test failure: Missing category: wairua"
