"""
Tests for reference report export:
- Growth workbook (openpyxl)
- Timeline document (python-docx)
"""

import pytest
from docx import Document
from docx.oxml.ns import qn
from openpyxl import load_workbook

from fowl_lifecycle.core.stage import BiologicalStage
from fowl_lifecycle.core.appearance import MORPH_FIELDS
from fowl_lifecycle.reports import (
    CURVE_HEADERS,
    HEADER_COLOR,
    STAGE_COLORS,
    TIMELINE_HEADERS,
    build_growth_workbook,
    build_timeline_document,
)


class TestGrowthWorkbook:
    """Tests for the growth curve workbook."""

    def test_sheets(self, tmp_path):
        """Test both sheets are written."""
        path = build_growth_workbook(str(tmp_path / "growth.xlsx"))
        wb = load_workbook(path)
        assert wb.sheetnames == ["Growth Curve", "Stage Envelopes"]

    def test_curve_rows(self, tmp_path):
        """Test the curve sheet has one row per sampled day."""
        path = build_growth_workbook(str(tmp_path / "growth.xlsx"), max_days=112, step_days=14)
        ws = load_workbook(path)["Growth Curve"]
        assert [ws.cell(row=4, column=c).value for c in range(1, len(CURVE_HEADERS) + 1)] == CURVE_HEADERS
        days = [ws.cell(row=r, column=1).value for r in range(5, ws.max_row + 1)]
        assert days == [0, 14, 28, 42, 56, 70, 84, 98, 112]
        last = [ws.cell(row=ws.max_row, column=c).value for c in range(1, 9)]
        assert last == [112, "Sub-Adult", 1400, 1120, 1610, 1008, 806, 1159]

    def test_envelope_rows(self, tmp_path):
        """Test one row per stage and sex with the morph defaults."""
        path = build_growth_workbook(str(tmp_path / "growth.xlsx"))
        ws = load_workbook(path)["Stage Envelopes"]
        assert ws.cell(row=3, column=4).value == MORPH_FIELDS[0]
        assert ws.max_row == 3 + 16
        assert ws.cell(row=4, column=1).value == "Egg"
        assert ws.cell(row=ws.max_row, column=1).value == "Senior"
        assert ws.cell(row=ws.max_row, column=2).value == "Female"

    def test_invalid_step(self, tmp_path):
        """Test a bad step is rejected before anything is written."""
        path = tmp_path / "growth.xlsx"
        with pytest.raises(ValueError):
            build_growth_workbook(str(path), step_days=0)
        assert not path.exists()


class TestTimelineDocument:
    """Tests for the growth timeline document."""

    def test_table(self, tmp_path):
        """Test the snapshot table has a header and one row per snapshot."""
        path = build_timeline_document(str(tmp_path / "timeline.docx"), max_days=100)
        doc = Document(path)
        table = doc.tables[0]
        assert [cell.text for cell in table.rows[0].cells] == TIMELINE_HEADERS
        assert len(table.rows) == 1 + 8
        first = [cell.text for cell in table.rows[1].cells]
        assert first[0] == "0"
        assert first[2] == "Fluff"
        assert first[3] == "0%"

    def test_stage_cells_tinted(self, tmp_path):
        """Test each stage cell carries its stage tint and the header is navy."""
        path = build_timeline_document(str(tmp_path / "timeline.docx"), max_days=100)
        table = Document(path).tables[0]

        def fill(cell):
            return cell._tc.tcPr.find(qn('w:shd')).get(qn('w:fill'))

        assert fill(table.rows[0].cells[0]) == HEADER_COLOR
        assert fill(table.rows[1].cells[1]) == STAGE_COLORS[BiologicalStage.HATCHLING]
        assert fill(table.rows[-1].cells[1]) == STAGE_COLORS[BiologicalStage.GROWER]

    def test_hen_document(self, tmp_path):
        """Test a hen timeline is titled accordingly."""
        path = build_timeline_document(str(tmp_path / "hen.docx"), is_male=False)
        doc = Document(path)
        assert any("Hen" in p.text for p in doc.paragraphs)
        assert len(doc.tables[0].rows) == 1 + 18


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
