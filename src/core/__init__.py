"""
Core domain models, decay mathematics and errors.

This module contains the foundational building blocks that are independent
of external systems (databases, HTTP routing, notification channels).
"""
