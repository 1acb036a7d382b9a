"""
ATM Terminal

Cash-dispensing terminal: PIN login, withdrawals against a balance with a
bounded overdraft, and note allocation from a depleting cassette stock.
"""

__version__ = "0.1.0"
