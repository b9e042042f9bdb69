"""
Single source of truth for the results workbook's colors, fonts, fills, borders.
"""
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
BRAND_BLUE = "007BFF"
ACCENT_ORANGE = "FF5722"
ALTERNATE_ROW = "F5F5F5"
WHITE = "FFFFFF"
BLACK = "000000"
GRAY_666 = "666666"
BORDER_GRAY = "CCCCCC"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=BRAND_BLUE)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
NAME_FONT = Font(name="Calibri", size=11, bold=True, color=BRAND_BLUE)
TIME_FONT = Font(name="Calibri", size=10, bold=True, color=ACCENT_ORANGE)
NOTICE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)

# ---------------------------------------------------------------------------
# Fills & borders
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=BRAND_BLUE, end_color=BRAND_BLUE, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")

THIN_BORDER = Border(
    left=Side(style="thin", color=BORDER_GRAY),
    right=Side(style="thin", color=BORDER_GRAY),
    top=Side(style="thin", color=BORDER_GRAY),
    bottom=Side(style="thin", color=BORDER_GRAY),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)
