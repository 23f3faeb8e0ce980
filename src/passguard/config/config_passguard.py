# config_passguard.py
"""
Configuration constants
"""
from pathlib import Path
# ==============================================================
# Toolkit settings
# ==============================================================
# Software version
VERSION = "1.0.0"

UTF8 = "utf-8"

# Bundled word lists used for classification
BASE_DIR = Path(__file__).resolve().parent.parent
WORDLIST_DIR = BASE_DIR / "resources"
COMMON_PASSWORDS_FILE = WORDLIST_DIR / "passwords.txt"
COMMON_NAMES_FILE = WORDLIST_DIR / "names.txt"

# ==============================================================
# Password generation defaults
# ==============================================================
PASS_DEFAULTS = {
    "length": 16,                   # Default generated password length
    "min_length": 16,               # Lengths below this are clamped up
    "max_length": 4096,             # Lengths above this are clamped down
    "max_required_retries": 64,     # Resample attempts for a required char
}

# ==============================================================
# Argon2id parameters
# ==============================================================
ARGON_TIME = 3              # Iterations - controls CPU cost
ARGON_MEMORY = 64 * 1024    # 64 MiB - controls RAM cost (KB)
ARGON_PARALLELISM = 2
SALT_LEN = 16               # bytes
ARGON_HASH_LEN = 32         # bytes

# (min, max) accepted for each hasher setting. Values outside are clamped.
HASHER_LIMITS = {
    "iterations": (1, 10),
    "memory_kb": (8 * 1024, 512 * 1024),
    "parallelism": (1, 12),
    "salt_length": (16, 64),
    "hash_length": (16, 64),
}

# Lowest memory cost used when recomputing a digest during verification
ARGON_MIN_MEMORY = 8 * 1024

# Encoded hash tags. DO NOT CHANGE
HASH_ALGORITHM_TAG = "argon2id"
HASH_VERSION_TAG = "v=19"

# ==============================================================
# Strength estimation
# ==============================================================
STRENGTH_TARGET_BITS = 128.0

# Upper bound for the effective attack rate (attempts per second)
MAX_ATTACK_RATE = 2**64 - 1

# ==============================================================
# Clipboard security
# ==============================================================
CLIPBOARD_TIMEOUT = 30               # Seconds before auto-clear
WIPE_CLIPBOARD = True                # Enable/disable clipboard flooding
CLIPBOARD_LENGTH = 80                # Number of entries to flood

# ==============================================================
# Logging & display
# ==============================================================
LOG_FILE = "error.log"
LOG_LEVEL = "ERROR"

SEP_LG = "=" * 50
SEP_SM = "-" * 50

# ==============================================================
# Optional: local overrides
# Local configuration file overrides standard config values

# ==============================================================
try:
    from passguard.config.config_local import *
except ImportError:
    pass  # No local config - use defaults above
