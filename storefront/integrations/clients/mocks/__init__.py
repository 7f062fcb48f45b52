"""
Mock integration clients.

These clients return realistic catalogue rows without calling any external API.
They are used when:
- The hosted catalogue database is not configured
- We want to exercise the storefront end-to-end without network access

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
"""
