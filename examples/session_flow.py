#!/usr/bin/env python3
"""
PC Builds session walkthrough — the whole cookie lifecycle in one script.

Registers a user → logs in → calls /auth/user → refreshes tokens →
adds a PC build → logs out → shows /auth/user is refused.
Run with: python examples/session_flow.py

Requires: pip install httpx
Backend must be running behind HTTPS (the session cookies are Secure):
  PCBUILDS_BASE=https://localhost:8443 python examples/session_flow.py
"""

import os
import sys
import uuid

import httpx

BASE = os.environ.get("PCBUILDS_BASE", "https://localhost:8443")


def main():
    run_id = uuid.uuid4().hex[:6]
    username = f"demo-{run_id}"
    password = "demo-password-123"
    # verify=False: local dev certificates are usually self-signed
    client = httpx.Client(base_url=BASE, timeout=10, verify=False)

    # ── Health check ──────────────────────────────────────────────
    print("Checking backend health...")
    try:
        resp = client.get("/health")
    except httpx.ConnectError:
        print(f"Backend not reachable at {BASE}")
        sys.exit(1)
    health = resp.json()
    print(f"  Status:   {health['status']}")
    print(f"  Database: {health['database']}")

    # ── Register ──────────────────────────────────────────────────
    print("\n1. Registering...")
    resp = client.post("/auth/register", json={
        "username": username,
        "name": f"Demo User {run_id}",
        "email": f"{username}@example.com",
        "password": password,
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    user = resp.json()["user"]
    print(f"   User: {user['username']} ({user['id'][:8]}...)")
    print(f"   Cookies: {sorted(client.cookies.keys())}")

    # ── Login (fresh cookie jar) ──────────────────────────────────
    print("\n2. Logging in with email...")
    client.cookies.clear()
    resp = client.post("/auth/login", json={
        "username": f"{username}@example.com",
        "password": password,
    })
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   {resp.json()['message']}")

    # ── Whoami ────────────────────────────────────────────────────
    print("\n3. Who am I?")
    resp = client.get("/auth/user")
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   {resp.json()['username']} since {resp.json()['created_at']}")

    # ── Refresh ───────────────────────────────────────────────────
    print("\n4. Rotating tokens...")
    resp = client.post("/auth/refresh-token")
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   {resp.json()['message']}")

    # ── Add a build ───────────────────────────────────────────────
    print("\n5. Adding a PC build...")
    resp = client.post("/pcs", json={
        "buildName": f"Demo Rig {run_id}",
        "price": "1299",
        "builder": username,
    })
    assert resp.status_code == 201, f"Failed: {resp.text}"
    build = resp.json()
    print(f"   Build: {build['buildName']} (${build['price']})")

    # ── Logout ────────────────────────────────────────────────────
    print("\n6. Logging out...")
    resp = client.post("/auth/logout")
    assert resp.status_code == 200, f"Failed: {resp.text}"
    resp = client.get("/auth/user")
    print(f"   /auth/user after logout → {resp.status_code} {resp.json()['message']}")

    print("\nDone.")


if __name__ == "__main__":
    main()
