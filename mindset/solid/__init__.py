"""
SOLID principles, each shown as a `bad` module that breaks the principle
and a `good` module that follows it.
"""
