"""Classifier module for sorting lines into integers, decimals and strings."""

from .classifier import Category, ClassifiedValue, classify, parse_decimal, parse_integer

__all__ = [
    "Category",
    "ClassifiedValue",
    "classify",
    "parse_integer",
    "parse_decimal",
]
