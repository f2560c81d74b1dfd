"""
Basic Bouncer usage example.

This example demonstrates the fundamental Bouncer operations:
- Loading keys from configuration
- Issuing and validating tokens
- Revoking a session
- Gating a user with a ruleset
"""

import asyncio
import logging
from datetime import datetime, timedelta

from bouncer import Bouncer, BouncerConfig, MemoryTokenStore, Ruleset
from bouncer.demo.main import generate_demo_keys


def has_role(role):
    def rule(user):
        return role in user.get("roles", [])
    return rule


async def owns_workspace(user):
    # Stand-in for a database lookup
    await asyncio.sleep(0)
    return user.get("workspace") == "acme"


async def basic_example():
    """Demonstrate basic Bouncer usage"""
    print("Basic Bouncer Example")
    print("=" * 30)

    # 1. Create configuration (normally BouncerConfig.from_env())
    private_pem, public_pem = generate_demo_keys()
    config = BouncerConfig(private_key=private_pem, public_key=public_pem)

    # 2. Create Bouncer with an in-memory deny list
    bouncer = Bouncer.from_config(MemoryTokenStore(), config)
    print("✓ Created Bouncer instance")

    # 3. Issue a token for user 42, valid for one day
    token = bouncer.create_token(42, datetime.now() + timedelta(days=1))
    print(f"✓ Issued token ({len(token)} characters)")

    # 4. Validate it as a request handler would
    print(f"✓ Token valid: {await bouncer.validate_token(token)}")

    # 5. Gate the user with rules
    ruleset = Ruleset([has_role("editor")], [owns_workspace])
    user = {"id": 42, "roles": ["editor"], "workspace": "acme"}
    print(f"✓ User allowed: {await bouncer.validate_user(user, ruleset)}")

    # 6. Log out: revoke the session
    await bouncer.revoke_encoded_token(token)
    print(f"✓ Token valid after logout: {await bouncer.validate_token(token)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(basic_example())
