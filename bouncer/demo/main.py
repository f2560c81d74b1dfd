"""
Bouncer Demo Application

This demo shows the token lifecycle and rule evaluation:
- Token issuance
- Token validation
- Rule-based user validation
- Revocation through the deny list
- Expiration
"""

import asyncio
import sys
from datetime import datetime, timedelta

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from bouncer import Bouncer, MemoryTokenStore, Ruleset


def generate_demo_keys():
    """Generate a throwaway RSA key pair as PEM strings."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")
    return private_pem, public_pem


def is_active(user):
    return user.get("active", False)


async def can_write(user):
    await asyncio.sleep(0)
    return user.get("permissions", {}).get("write", False)


async def main():
    """Main demo function"""
    print("Bouncer Demo Application")
    print("=" * 50)
    print()

    private_pem, public_pem = generate_demo_keys()
    store = MemoryTokenStore()
    bouncer = Bouncer(store, private_pem, public_pem)
    print("✓ Created Bouncer with a fresh RSA key pair")
    print()

    print("Step 1: Token Issuance")
    print("-" * 40)
    token = bouncer.create_token(1, datetime.now() + timedelta(hours=1))
    session = bouncer.read_token(token)
    print(f"✓ Issued token for user {session.user_id}")
    print(f"  - Session ID: {session.session_id}")
    print(f"  - Expires at: {session.expires_at.isoformat()}")
    print()

    print("Step 2: Token Validation")
    print("-" * 40)
    if not await bouncer.validate_token(token):
        print("✗ Fresh token failed validation")
        return 1
    print("✓ Token is valid")
    payload, signature = token.split(".")
    tampered = f"{payload}.{'A' if signature[0] != 'A' else 'B'}{signature[1:]}"
    print(f"✓ Tampered token valid: {await bouncer.validate_token(tampered)}")
    print()

    print("Step 3: User Validation")
    print("-" * 40)
    ruleset = Ruleset().add_sync_rule(is_active).add_async_rule(can_write)
    reader = {"id": 1, "active": True, "permissions": {"write": False}}
    writer = {"id": 2, "active": True, "permissions": {"write": True}}
    print(f"✓ Reader may write: {await bouncer.validate_user(reader, ruleset)}")
    print(f"✓ Writer may write: {await bouncer.validate_user(writer, ruleset)}")
    print()

    print("Step 4: Revocation")
    print("-" * 40)
    await bouncer.revoke_token(session.session_id)
    if await bouncer.validate_token(token):
        print("✗ Revoked token still validates")
        return 1
    print("✓ Revoked token is rejected")
    print()

    print("Step 5: Expiration")
    print("-" * 40)
    expired = bouncer.create_token(1, datetime.now() - timedelta(seconds=1))
    print(f"✓ Expired token valid: {await bouncer.validate_token(expired)}")
    print()

    print("Demo completed successfully!")
    return 0


def run():
    """Console script entry point."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nDemo interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    run()
