"""
Ordering - products, orders and order totals

Author: TM3
Date: 2026-10-19
"""
__version__ = "1.0.0"
