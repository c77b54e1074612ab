# auth/generate_key.py
import logging
import secrets
from pathlib import Path

from dotenv import get_key, set_key

from config import parse_api_keys

logger = logging.getLogger(__name__)

def generate_api_key(length=32):
    return secrets.token_hex(length // 2)

def add_key_to_env(key, env_file=".env"):
    """Append `key` to API_KEYS in `env_file`, creating the file if needed."""
    path = Path(env_file)
    path.touch(exist_ok=True)
    keys = parse_api_keys(get_key(path, "API_KEYS") or "")
    keys.append(key)
    set_key(path, "API_KEYS", ",".join(keys), quote_mode="never")
    logger.info(f"API key added to {path} ({len(keys)} configured)")
    return keys

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    k = generate_api_key()
    add_key_to_env(k)
    print("New API key:", k)
