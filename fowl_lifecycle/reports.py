"""
Fowl Lifecycle — Reference Reports
Exports the growth curve, stage envelopes and growth timeline as documents
for breeders: an Excel workbook (openpyxl) and a Word timeline (python-docx).
"""

from typing import Optional
import logging

from docx import Document
from docx.shared import Pt, RGBColor
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.oxml import OxmlElement
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from .config import GROWTH
from .core.stage import BiologicalStage, iter_hatched_stages
from .core.appearance import MORPH_FIELDS, BirdAppearance, aseel_base
from .morph.constraints import for_stage
from .morph.engine import generate_growth_timeline
from .growth.curve import generate_curve

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E79"

# Row tint per stage in the workbook
STAGE_COLORS = {
    BiologicalStage.EGG: "F2F2F2",
    BiologicalStage.HATCHLING: "FFF2CC",
    BiologicalStage.CHICK: "FFEB9C",
    BiologicalStage.GROWER: "E2EFDA",
    BiologicalStage.SUB_ADULT: "C6EFCE",
    BiologicalStage.ADULT: "BDD7EE",
    BiologicalStage.MATURE_ADULT: "D9D2E9",
    BiologicalStage.SENIOR: "FFC7CE",
}

CURVE_HEADERS = [
    "Day", "Stage",
    "Male Ideal (g)", "Male Min (g)", "Male Max (g)",
    "Female Ideal (g)", "Female Min (g)", "Female Max (g)",
]
TIMELINE_HEADERS = ["Age (days)", "Stage", "Feather Texture", "Maturity", "Key Features"]


def _solid_fill(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _thin_border() -> Border:
    return Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )


def _write_header_row(ws, row, headers):
    header_fill = _solid_fill(HEADER_COLOR)
    header_font = Font(bold=True, color="FFFFFF")
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = _thin_border()


def shade_cell(cell, color: str):
    """Fill a Word table cell with a hex color."""
    shading = OxmlElement('w:shd')
    shading.set(qn('w:val'), 'clear')
    shading.set(qn('w:fill'), color)
    cell._tc.get_or_add_tcPr().append(shading)


def add_snapshot_table(doc, snapshots):
    """
    Add the timeline table: a white-on-blue header row, then one row per
    snapshot with its stage cell tinted like the workbook.
    """
    table = doc.add_table(rows=1, cols=len(TIMELINE_HEADERS))
    table.style = 'Table Grid'

    for cell, header in zip(table.rows[0].cells, TIMELINE_HEADERS):
        run = cell.paragraphs[0].add_run(header)
        run.bold = True
        run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
        shade_cell(cell, HEADER_COLOR)

    for snapshot in snapshots:
        summary = snapshot.summary
        values = (
            str(snapshot.age_days),
            f"{summary.emoji} {summary.stage_name}",
            summary.feather_texture,
            f"{summary.maturity_percent}%",
            "; ".join(summary.key_features) or "-",
        )
        cells = table.add_row().cells
        for cell, value in zip(cells, values):
            cell.text = value
        shade_cell(cells[1], STAGE_COLORS[snapshot.stage])

    return table


# =============================================================================
# WORKBOOK: GROWTH CURVE & STAGE ENVELOPES
# =============================================================================

def build_growth_workbook(path: str, max_days: int = GROWTH.default_curve_max_days,
                          step_days: int = GROWTH.default_curve_step_days) -> str:
    """
    Write the reference weight curve and per-stage morph defaults to ``path``.

    Sheet "Growth Curve" has a header row at row 4 and one row per sampled
    day; sheet "Stage Envelopes" has a header row at row 3 and one row per
    stage and sex.
    """
    male_curve = generate_curve(True, max_days, step_days)
    female_curve = generate_curve(False, max_days, step_days)
    border = _thin_border()

    wb = Workbook()

    # ===== SHEET 1: Growth Curve =====
    ws1 = wb.active
    ws1.title = "Growth Curve"
    ws1['A1'] = "ASEEL GROWTH CURVE - EXPECTED WEIGHT BY AGE"
    ws1['A1'].font = Font(bold=True, size=14)
    ws1['A2'] = (f"Healthy band {int(GROWTH.min_weight_ratio * 100)}-{int(GROWTH.max_weight_ratio * 100)}% "
                 f"of ideal | Hens at {int(GROWTH.female_weight_ratio * 100)}% of cock weight")
    ws1['A2'].font = Font(italic=True, color=HEADER_COLOR)

    _write_header_row(ws1, 4, CURVE_HEADERS)

    row = 5
    for male, female in zip(male_curve, female_curve):
        stage = BiologicalStage.from_age_days(male.age_days)
        values = [
            male.age_days, stage.display_name,
            male.ideal_grams, male.min_grams, male.max_grams,
            female.ideal_grams, female.min_grams, female.max_grams,
        ]
        fill = _solid_fill(STAGE_COLORS[stage])
        for col, value in enumerate(values, 1):
            cell = ws1.cell(row=row, column=col, value=value)
            cell.border = border
            if col == 2:
                cell.fill = fill
        row += 1

    ws1.column_dimensions['A'].width = 8
    ws1.column_dimensions['B'].width = 14
    for col in range(3, len(CURVE_HEADERS) + 1):
        ws1.column_dimensions[get_column_letter(col)].width = 16

    # ===== SHEET 2: Stage Envelopes =====
    ws2 = wb.create_sheet("Stage Envelopes")
    ws2['A1'] = "MORPH DEFAULTS BY STAGE AND SEX"
    ws2['A1'].font = Font(bold=True, size=14)

    _write_header_row(ws2, 3, ["Stage", "Sex", "Texture"] + list(MORPH_FIELDS))

    row = 4
    for stage in BiologicalStage.ordered():
        fill = _solid_fill(STAGE_COLORS[stage])
        for is_male in (True, False):
            constraints = for_stage(stage, is_male)
            values = [stage.display_name, "Male" if is_male else "Female",
                      constraints.default_feather_texture]
            values += [morph_range.default_value for morph_range in constraints.ranges().values()]
            for col, value in enumerate(values, 1):
                cell = ws2.cell(row=row, column=col, value=value)
                cell.border = border
                cell.fill = fill
            row += 1

    ws2.column_dimensions['A'].width = 14
    ws2.column_dimensions['B'].width = 8
    ws2.column_dimensions['C'].width = 12
    for col in range(4, len(MORPH_FIELDS) + 4):
        ws2.column_dimensions[get_column_letter(col)].width = 15

    wb.save(path)
    logger.info(f"Created growth workbook: {path} ({len(male_curve)} curve rows)")
    return path


# =============================================================================
# DOCUMENT: GROWTH TIMELINE
# =============================================================================

def build_timeline_document(path: str, base: Optional[BirdAppearance] = None,
                            is_male: bool = True, max_days: int = 730) -> str:
    """Write the growth timeline of ``base`` (Aseel reference look by default) to ``path``."""
    if base is None:
        base = aseel_base(is_male)
    timeline = generate_growth_timeline(base, is_male, max_days)

    doc = Document()

    title = doc.add_heading('GROWTH TIMELINE', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    subtitle = doc.add_paragraph(f"Aseel {'Cock' if is_male else 'Hen'}: Hatch to Day {max_days}")
    subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER
    subtitle.runs[0].font.size = Pt(16)
    subtitle.runs[0].bold = True

    doc.add_heading('Stages', level=1)
    for stage in iter_hatched_stages():
        end = f"day {stage.max_days}" if stage.max_days is not None else "onward"
        doc.add_paragraph(f"{stage.emoji} {stage.display_name}: day {stage.min_days} to {end}",
                          style='List Bullet')

    doc.add_heading('Snapshots', level=1)
    add_snapshot_table(doc, timeline)

    doc.save(path)
    logger.info(f"Created timeline document: {path} ({len(timeline)} snapshots)")
    return path
