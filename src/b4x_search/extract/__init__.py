from .results import extract_result_from_item, parse_search_results
from .text import strip_html

__all__ = ["extract_result_from_item", "parse_search_results", "strip_html"]
