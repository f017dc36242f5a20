"""
auth — User authentication module.

Provides:
  • bcrypt password hashing
  • JWT access / refresh token issuance and verification
  • Signup / login API routes
  • ``get_current_user`` FastAPI dependency
"""
