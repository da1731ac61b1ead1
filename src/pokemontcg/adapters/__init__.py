"""Adapters (pure I/O and wire formats).

Why a package:
- Groups what talks to the network (`http_client`) and what turns response
  bodies into records (`resources`).
- The Core only sees `ResourceKind` and the error types.
"""
