"""Excel export of search results."""
from .writer import ExcelRenderer
