"""Natural-language filter parsing.

The query layer converts a free-text English query into a strict `FilterSet` object, which is then
applied to stored records by the filter engine.
"""
