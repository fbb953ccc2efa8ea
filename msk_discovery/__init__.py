"""
Amazon MSK cluster discovery for the MSK client-config generator.

Lists the clusters visible to the account and looks up each cluster's
bootstrap brokers.
"""

from .msk_discovery import MSKDirectory

__version__ = "1.0.0"

__all__ = ["MSKDirectory"]
