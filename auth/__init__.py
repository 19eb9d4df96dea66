"""
auth — User authentication module.

Provides:
  • JWT session token creation & verification
  • Password hashing (bcrypt, work factor 10)
  • Register / Login / Me API routes
  • ``require_claims`` FastAPI dependency
"""
