"""
cnbrates - Czech National Bank Exchange Rates

Parses the CNB daily exchange-rate bulletin into per-unit rates against CZK
for a caller-chosen set of currencies.
"""

__version__ = "1.0.0"
