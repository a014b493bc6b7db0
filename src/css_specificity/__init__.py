"""CSS selector specificity: computation, comparison and cascade ordering."""

from css_specificity.cascade import cascade, sort_rules
from css_specificity.config import SpecificityConfig
from css_specificity.selector import (
    accumulate,
    count_classes,
    count_ids,
    count_types,
    from_selector,
    split_selector_list,
)
from css_specificity.specificity import Specificity
from css_specificity.stylesheet import (
    StyleRule,
    Stylesheet,
    StylesheetError,
    parse_stylesheet,
)

__version__ = "0.1.0"

__all__ = [
    # value type
    "Specificity",
    # analyzer
    "from_selector",
    "count_ids",
    "count_classes",
    "count_types",
    "accumulate",
    "split_selector_list",
    # stylesheet
    "parse_stylesheet",
    "Stylesheet",
    "StyleRule",
    "StylesheetError",
    # cascade
    "sort_rules",
    "cascade",
    # config
    "SpecificityConfig",
]
