"""Worked solutions for the exercise topics."""

__all__ = [
    "basics",
    "concurrency",
    "enums",
    "errors",
    "hashmaps",
    "iterators",
    "quizzes",
    "smart_pointers",
    "structs",
    "traits",
]