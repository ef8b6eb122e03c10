"""
auth — User authentication module.

Provides:
  • Signed token creation & verification
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``get_current_user`` FastAPI dependency (the bearer-token gate)
"""
