"""PC Builds — REST backend for browsing and managing PC builds.

CRUD over a single "PC build" resource, plus username/password
authentication with access/refresh token cookies.
"""

__version__ = "0.1.0"
