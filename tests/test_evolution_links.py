from __future__ import annotations

from algoevo.matrix.links import (
    build_links,
    evolution_view,
    reference_label,
    resolve_by_id,
    resolve_by_name,
    resolve_by_substring,
    resolve_reference,
)
from tests.record_helpers import make_tech


TECHS = [
    make_tech("lstm", "LSTM"),
    make_tech("transformer", "Transformer"),
    make_tech("excel-charts", "Excel Charts", category="visualization"),
    make_tech("gru", "LSTM Lite"),
]


def test_resolve_by_id_wins_first():
    assert resolve_reference("lstm", TECHS).id == "lstm"
    assert resolve_by_id("transformer", TECHS).name == "Transformer"


def test_resolve_by_exact_name():
    assert resolve_by_id("Excel Charts", TECHS) is None
    assert resolve_by_name("Excel Charts", TECHS).id == "excel-charts"
    assert resolve_reference("Excel Charts", TECHS).id == "excel-charts"


def test_exact_name_is_case_sensitive():
    assert resolve_by_name("excel charts", TECHS) is None
    assert resolve_reference("excel charts", TECHS).id == "excel-charts"


def test_resolve_by_substring_either_direction():
    assert resolve_by_substring("Excel", TECHS).id == "excel-charts"
    assert resolve_by_substring("Vanilla Transformer Model", TECHS).id == "transformer"


def test_unresolved_reference_keeps_raw_label():
    assert resolve_reference("Kalman Filter", TECHS) is None
    assert reference_label("Kalman Filter", TECHS) == "Kalman Filter"
    assert resolve_reference("", TECHS) is None


def test_build_links_marks_linked_and_raw():
    links = build_links(["transformer", "Kalman Filter"], TECHS)
    assert links[0].linked and links[0].label == "Transformer"
    assert not links[1].linked and links[1].label == "Kalman Filter"


def test_evolution_view_for_record_without_evolution():
    view = evolution_view(TECHS[1], TECHS)
    assert view.id == "transformer"
    assert view.predecessors == [] and view.successors == [] and view.variants == []
