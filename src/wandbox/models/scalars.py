"""Model NewTypes to disambiguate multi-usage types."""

from typing import NewType

CompilerName = NewType("CompilerName", str)
"""Derived from str to represent specifically a Wandbox compiler name (`gcc-head`)."""

LanguageName = NewType("LanguageName", str)
"""Derived from str to represent specifically a lowercase language name (`c++`).

Wandbox reports languages with their display casing (`C++`), they are always \
lowercased before being used as identifiers.
"""
