"""
core/fast.py

Выбор реализации union-find для доски.

Скомпилированное расширение core.fast_union_find (см. setup.py) имеет
приоритет; без него используется core.fast_union_find_py с тем же API.
Обе реализации работают с одними и теми же списками parent/size/edge.
"""

try:
    from .fast_union_find import find_leader, join_groups
    USING_CYTHON = True
except ImportError:
    from .fast_union_find_py import find_leader, join_groups
    USING_CYTHON = False

IMPLEMENTATION = find_leader.__module__


def get_implementation_info() -> str:
    """Строка для лога: какая реализация union-find загружена."""
    kind = "Cython (compiled)" if USING_CYTHON else "Pure Python (fallback)"
    return f"{kind}, module {IMPLEMENTATION}"


__all__ = [
    'find_leader',
    'join_groups',
    'IMPLEMENTATION',
    'USING_CYTHON',
    'get_implementation_info'
]
