"""shapematch — schema-driven validation and conversion of untyped values."""

from shapematch.binding import converted
from shapematch.domain.errors import (
    ArgumentConversionFailed,
    ConversionError,
    ElementConversionFailed,
    PropertyConversionFailed,
    TypeMismatch,
    format_path,
)
from shapematch.domain.matchers import (
    ArrayMatcher,
    BooleanMatcher,
    ClassMatcher,
    ExactMatcher,
    Matcher,
    NumberMatcher,
    ObjectMatcher,
    OptionalMatcher,
    StringMatcher,
    convert,
    loose_matches,
    matches,
    optional,
    to_matcher,
)
from shapematch.domain.schema import MISSING, SchemaNode

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "ArgumentConversionFailed",
    "ArrayMatcher",
    "BooleanMatcher",
    "ClassMatcher",
    "ConversionError",
    "ElementConversionFailed",
    "ExactMatcher",
    "Matcher",
    "NumberMatcher",
    "ObjectMatcher",
    "OptionalMatcher",
    "PropertyConversionFailed",
    "SchemaNode",
    "StringMatcher",
    "TypeMismatch",
    "__version__",
    "convert",
    "converted",
    "format_path",
    "loose_matches",
    "matches",
    "optional",
    "to_matcher",
]
