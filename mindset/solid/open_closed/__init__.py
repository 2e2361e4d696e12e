"""
Open/Closed Principle: open for extension, closed for modification.
"""
