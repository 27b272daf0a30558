"""Individual normalization stages, applied in order by wikinorm.normal."""

from .category import DEFAULT_CATEGORY, merge_multi_categories, strip_default_category
from .charclass import replace_disallowed, strip_leading_slash
from .collapse import collapse_separators
from .decode import percent_decode
from .underscore import replace_underscores
from .unicode import fold, fold_case, normalize_nfkc, trim

__all__ = [
    "DEFAULT_CATEGORY",
    "collapse_separators",
    "fold",
    "fold_case",
    "merge_multi_categories",
    "normalize_nfkc",
    "percent_decode",
    "replace_disallowed",
    "replace_underscores",
    "strip_default_category",
    "strip_leading_slash",
    "trim",
]
