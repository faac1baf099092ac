"""
zkscrypto command line

Derives a key from a seed and prints every artifact, one per line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from zkscrypto.api import init, new_private_key
from zkscrypto.config import CryptoConfig, set_config, setup_logging
from zkscrypto.core.errors import ZksCryptoError, MalformedEncodingError

logger = logging.getLogger(__name__)

DEFAULT_SEED = bytes(32)
DEFAULT_MESSAGE = "hello"


def _parse_seed(text: Optional[str]) -> bytes:
    if text is None:
        return DEFAULT_SEED
    body = text[2:] if text[:2].lower() == "0x" else text
    try:
        return bytes.fromhex(body)
    except ValueError as e:
        raise MalformedEncodingError(f"Seed is not valid hex: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="zkSync account keys and MuSig signatures")
    parser.add_argument("--seed", metavar="HEX", help="Seed, at least 32 bytes (default: 32 zero bytes)")
    parser.add_argument("--message", default=DEFAULT_MESSAGE, help="UTF-8 message to sign")
    parser.add_argument("--config", metavar="PATH", help="JSON configuration file")
    parser.add_argument("--log-level", help="Override configured log level")
    args = parser.parse_args(argv)

    try:
        config = CryptoConfig.load(args.config) if args.config else CryptoConfig()
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: cannot load configuration {args.config}: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.log.level = args.log_level

    try:
        set_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    setup_logging(config.log)

    try:
        seed = _parse_seed(args.seed)
        init()

        private_key = new_private_key(seed)
        public_key = private_key.public_key()
        pubkey_hash = public_key.hash()
        signature = private_key.sign(args.message.encode("utf-8"))
    except ZksCryptoError as e:
        logger.debug(f"Command failed: {type(e).__name__}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Seed: {seed.hex()}")
    print(f"Private key: {private_key.hex_string()}")
    print(f"Public key: {public_key.hex_string()}")
    print(f"Public key hash: {pubkey_hash.hex_string()}")
    print(f"Signature: {signature.hex_string()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
