"""Authentication: passwords, token pairs, session cookies, and the gateway.

Learn: One authentication path: username/email + password → a pair of
JWTs delivered as HttpOnly cookies:
1. access_token  — 15 min, sent on every request (path /)
2. refresh_token — 7 days, only sent to POST /auth/refresh-token

Protected routes depend on require_auth, which turns the access cookie
into an AuthContext or rejects the request with 403.
"""
