"""HR Analytics package.

Grouped/subtotalled and ranked reports over the HRSystem sample schema,
organized by feature modules (grouping, aggregates, ranking, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
