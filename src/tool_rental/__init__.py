"""
Tool Rental Package

Checkout pricing for a tool rental counter.
Resolves Tool Code → Charge Days → Charges pipeline with US holiday rules.
"""

__version__ = "1.0.0"
