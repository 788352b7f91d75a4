"""scrapekit - attribute-scoped HTML fragment extraction without a parser."""

from .client import WebClient
from .comparison import Comparison
from .errors import InvalidArgumentError, SubstringNotFoundError
from .fragments import (
    find_fragment,
    inner_html_by_attribute,
    inner_html_by_attribute_all,
    inner_html_by_attribute_all_or_default,
    inner_html_by_attribute_all_or_fail,
    inner_html_by_attribute_or_default,
    inner_html_by_attribute_or_fail,
    inner_html_by_class,
    inner_html_by_class_all,
    inner_html_by_class_all_or_default,
    inner_html_by_class_all_or_fail,
    inner_html_by_class_or_default,
    inner_html_by_class_or_fail,
    iter_fragments,
)
from .params import RequestParams
from .spans import AttributeMatch, Fragment, Span, TagSpan
from .substrings import (
    after,
    after_or_default,
    after_or_fail,
    before,
    before_or_default,
    before_or_fail,
    between,
    between_last,
    between_last_or_default,
    between_last_or_fail,
    between_or_default,
    between_or_fail,
    betweens,
    betweens_or_default,
    betweens_or_fail,
    find_all_between,
    find_between,
    find_between_last,
)


__version__ = "0.1.0"
__all__ = [
    "Comparison",
    "InvalidArgumentError",
    "SubstringNotFoundError",
    "RequestParams",
    "WebClient",
    "Span",
    "AttributeMatch",
    "TagSpan",
    "Fragment",
    "find_between",
    "find_all_between",
    "find_between_last",
    "between",
    "between_or_default",
    "between_or_fail",
    "betweens",
    "betweens_or_default",
    "betweens_or_fail",
    "between_last",
    "between_last_or_default",
    "between_last_or_fail",
    "after",
    "after_or_default",
    "after_or_fail",
    "before",
    "before_or_default",
    "before_or_fail",
    "find_fragment",
    "iter_fragments",
    "inner_html_by_attribute",
    "inner_html_by_attribute_or_default",
    "inner_html_by_attribute_or_fail",
    "inner_html_by_class",
    "inner_html_by_class_or_default",
    "inner_html_by_class_or_fail",
    "inner_html_by_attribute_all",
    "inner_html_by_attribute_all_or_default",
    "inner_html_by_attribute_all_or_fail",
    "inner_html_by_class_all",
    "inner_html_by_class_all_or_default",
    "inner_html_by_class_all_or_fail",
]
