"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: the ``payment-system`` demonstration command

Entrypoints wire configuration, logging and services together and are the
only place where domain exceptions are caught.
"""
