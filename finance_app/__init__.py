"""
Finance App

A console demo of a savings account and the transaction processors
that feed it, built on Decimal money and structured logging.
"""

__version__ = "1.0.0"
