"""
Contracts shared by the mock and REST integration clients.

Why this exists:
- Keeps Category/Product/OrderIntent shapes identical across environments
- Prevents "guessing" payload formats in flows and endpoints
"""
