from css_specificity.stylesheet.errors import StylesheetError
from css_specificity.stylesheet.model import StyleRule, Stylesheet
from css_specificity.stylesheet.parser import parse_stylesheet

__all__ = ["parse_stylesheet", "Stylesheet", "StyleRule", "StylesheetError"]
