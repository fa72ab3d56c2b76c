"""
Core domain models, numerical engines, and contracts.

This module contains the foundational building blocks that are independent
of the front end and of remote services.
"""
