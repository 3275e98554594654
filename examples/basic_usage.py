#!/usr/bin/env python3
"""Basic blakehash example.

Shows one-shot hashing, incremental hashing with reuse, salted and
personalized MACs, and subkey derivation.
"""

import sys
from pathlib import Path

# Add the parent directory to the path so we can import blakehash
sys.path.insert(0, str(Path(__file__).parent.parent))

from blakehash import Blake2b, derive_subkey, hash, mac, verify_mac


def basic_example():
    """Run a basic example of blakehash usage."""
    print("blakehash basic example")
    print("=" * 40)

    print("\n1. One-shot digest of b'abc'...")
    print(f"   {hash(b'abc', 64).hex()}")

    print("\n2. Incremental hashing over chunks...")
    engine = Blake2b(32)
    for chunk in (b"hello ", b"incremental ", b"world"):
        engine.update(chunk)
    digest = engine.finalize()
    print(f"   {digest.hex()}")
    print(f"   same as one-shot: {digest == hash(b'hello incremental world', 32)}")

    print("\n3. Reusing the engine after finalize...")
    print(f"   {engine.finalize(b'next message').hex()}")

    print("\n4. Keyed MAC with salt and personalization...")
    key = bytes(range(32))
    salt = b"\x01" * 16
    person = b"example-app-v1".ljust(16, b"\x00")
    payload = b"authenticated payload"
    tag = Blake2b(16, key=key).salt(salt).personalization(person).finalize(payload)
    print(f"   tag: {tag.hex()}")
    print(f"   plain MAC differs: {tag != mac(key, payload, 16)}")
    print(f"   verifies: {verify_mac(key, payload, tag, salt=salt, person=person)}")

    print("\n5. Deriving subkeys...")
    for subkey_id in range(3):
        print(f"   subkey {subkey_id}: {derive_subkey(key, subkey_id, b'example').hex()}")

    print("\nDone.")


if __name__ == "__main__":
    basic_example()
