"""Domain layer: layouts, LaTeX document generation, page-count policy.

Everything here is pure: no printing, no logging, no process exits.
"""
