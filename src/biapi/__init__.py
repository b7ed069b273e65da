"""
biapi - command-line client for the Budgea banking-aggregation API.
"""

__version__ = "1.0.0"
__app_name__ = "biapi-cli"
