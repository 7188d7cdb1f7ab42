"""Laboratory-collection appointment analytics.

Raw CSV export -> typed records -> filters, per-unit daily quota alerts and
summary metrics.
"""

__version__ = "0.1.0"
