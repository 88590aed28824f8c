"""
Class matchers.

Supported matchers:
    - type_equals: class is exactly a given class
    - type_extends: class is a given class or a subclass of it
    - qualified_name_satisfies: ``<module>.<qualname>`` satisfies a sub-predicate
    - simple_name_satisfies: ``__name__`` satisfies a sub-predicate
    - container_of_type: collection type plus element type, optionally chained
    - of_type: narrow a value by its class, then match the value
"""

from .matchers import (
    QualifiedNameSatisfies,
    SimpleNameSatisfies,
    TypeEquals,
    TypeExtends,
    TypeMatcher,
    qualified_name_satisfies,
    simple_name_satisfies,
    type_equals,
    type_extends,
)
from .containers import ContainerOfType, container_of_type
from .narrowing import OfType, OfTypeBuilder, of_type

__all__ = [
    # Class matchers
    "QualifiedNameSatisfies",
    "SimpleNameSatisfies",
    "TypeEquals",
    "TypeExtends",
    "TypeMatcher",
    "qualified_name_satisfies",
    "simple_name_satisfies",
    "type_equals",
    "type_extends",
    # Containers
    "ContainerOfType",
    "container_of_type",
    # Narrowing
    "OfType",
    "OfTypeBuilder",
    "of_type",
]
