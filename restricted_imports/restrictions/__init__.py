from restricted_imports.restrictions.patterns import CompiledPattern, compile_pattern
from restricted_imports.restrictions.restriction import (
    Restriction,
    create_restriction,
    fold_restriction,
)
from restricted_imports.restrictions.restriction_set import RestrictionSet

__all__ = [
    "CompiledPattern",
    "Restriction",
    "RestrictionSet",
    "compile_pattern",
    "create_restriction",
    "fold_restriction",
]
