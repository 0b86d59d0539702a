from __future__ import annotations

from algoevo.core.schema import RevisionData
from algoevo.matrix.cells import TechCell, split_cell_text


def test_split_cell_text():
    assert split_cell_text("Pandas, NumPy") == ["Pandas", "NumPy"]
    assert split_cell_text("") == []


def test_add_skips_substring_and_exact_matches():
    cell = TechCell.from_revision(RevisionData(tech="SVM, Random Forest", period="early", desc=""))
    assert not cell.add("random forest", revision="rev2")
    assert not cell.add("Forest", revision="rev2")
    assert cell.add("LSTM", revision="rev2")
    assert cell.text == "SVM, Random Forest, LSTM"


def test_add_into_empty_cell_takes_revision_style():
    cell = TechCell()
    assert cell.add("Transformer", revision="rev4")
    assert cell.period == "modern"
    assert cell.to_revision().tech == "Transformer"


def test_empty_cell_serializes_as_empty():
    cell = TechCell(desc="Отсутствие адаптации")
    data = cell.to_revision()
    assert data.tech == "" and data.period == "empty"
    assert data.desc == "Отсутствие адаптации"


def test_add_note_once():
    cell = TechCell(desc="Базовое описание")
    assert cell.add_note('(из кейса "X")')
    assert not cell.add_note('(из кейса "X")')
    assert cell.desc == 'Базовое описание (из кейса "X")'
